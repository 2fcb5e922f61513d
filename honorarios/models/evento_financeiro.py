# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade EventoFinanceiro (acordo, sentença, contrato...).

Imutável depois de criado: títulos e créditos apenas o referenciam.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from honorarios.database import Base


class EventoFinanceiro(Base):
    __tablename__ = "eventos_financeiros"

    id = Column(Integer, primary_key=True, index=True)
    processo_id = Column(Integer, ForeignKey("processos.id"), nullable=False, index=True)
    tipo = Column(String(20), nullable=False)
    data_evento = Column(Date, nullable=False)
    descricao = Column(String(255), nullable=False)
    valor_total = Column(Numeric(12, 2), nullable=False)
    criado_em = Column(DateTime, default=datetime.utcnow)

    processo = relationship("Processo")
    titulos = relationship(
        "TituloFinanceiro",
        back_populates="evento",
        order_by="TituloFinanceiro.data_vencimento",
    )
