# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade CreditoStaff (valor devido a um profissional).

Ciclo de vida: RETIDO -> DISPONIVEL (título do evento pago) -> PAGO (repasse).
PAGO é terminal.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, Boolean, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from honorarios.database import Base
from honorarios.dominio import StatusCredito


class CreditoStaff(Base):
    __tablename__ = "creditos_staff"
    __table_args__ = (
        # Um crédito de folha por profissional e mês (NULL não conflita)
        UniqueConstraint("staff_id", "tipo", "mes_referencia", name="uq_credito_folha_mes"),
    )

    id = Column(Integer, primary_key=True, index=True)
    staff_id = Column(Integer, ForeignKey("staff.id"), nullable=False, index=True)
    tipo = Column(String(20), nullable=False)
    # Ausente em créditos manuais e de folha
    evento_financeiro_id = Column(Integer, ForeignKey("eventos_financeiros.id"), nullable=True, index=True)
    processo_id = Column(Integer, ForeignKey("processos.id"), nullable=True)
    descricao = Column(String(255), nullable=False)
    valor = Column(Numeric(12, 2), nullable=False)
    status = Column(String(12), nullable=False, default=StatusCredito.DISPONIVEL.value, index=True)
    data = Column(DateTime, default=datetime.utcnow)

    previsao_pagamento = Column(Date, nullable=True)
    liberacao_solicitada = Column(Boolean, default=False)
    motivo_liberacao = Column(Text, nullable=True)

    # Folha mensal: "YYYY-MM"
    mes_referencia = Column(String(7), nullable=True, index=True)

    # Preenchidos pelo repasse
    data_pagamento = Column(DateTime, nullable=True)
    pago_por_id = Column(Integer, ForeignKey("usuarios.id"), nullable=True)
    titulo_repasse_id = Column(Integer, ForeignKey("titulos_financeiros.id"), nullable=True)

    staff = relationship("Staff", back_populates="creditos")
