# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade TituloFinanceiro (conta a receber ou a pagar).
"""
from datetime import datetime, date
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from honorarios.database import Base
from honorarios.dominio import StatusTitulo


class TituloFinanceiro(Base):
    __tablename__ = "titulos_financeiros"

    id = Column(Integer, primary_key=True, index=True)
    # Presente somente quando o título nasceu de um evento financeiro
    evento_financeiro_id = Column(Integer, ForeignKey("eventos_financeiros.id"), nullable=True, index=True)
    processo_id = Column(Integer, ForeignKey("processos.id"), nullable=True, index=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=True)
    # Profissional pago (somente títulos de repasse)
    staff_id = Column(Integer, ForeignKey("staff.id"), nullable=True, index=True)

    descricao = Column(String(255), nullable=False)
    tipo = Column(String(10), nullable=False)  # RECEITA ou DESPESA
    origem = Column(String(40), nullable=False)
    valor = Column(Numeric(12, 2), nullable=False)
    data_vencimento = Column(Date, nullable=False)
    status = Column(String(10), nullable=False, default=StatusTitulo.PENDENTE.value)
    data_pagamento = Column(DateTime, nullable=True)  # preenchida somente quando PAGO
    criado_em = Column(DateTime, default=datetime.utcnow)

    evento = relationship("EventoFinanceiro", back_populates="titulos")

    @property
    def status_efetivo(self) -> str:
        """Status para exibição: PENDENTE vencido aparece como ATRASADO."""
        if self.status == StatusTitulo.PENDENTE.value and self.data_vencimento < date.today():
            return StatusTitulo.ATRASADO.value
        return self.status
