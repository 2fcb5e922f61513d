# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Processo.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from honorarios.database import Base


class Processo(Base):
    __tablename__ = "processos"

    id = Column(Integer, primary_key=True, index=True)
    numero = Column(String(30), index=True, nullable=True)  # número CNJ
    titulo = Column(String(200), nullable=False)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=False)
    # Advogado responsável: recebe a comissão automática dos eventos financeiros
    advogado_responsavel_id = Column(Integer, ForeignKey("staff.id"), nullable=True)
    criado_em = Column(DateTime, default=datetime.utcnow)

    cliente = relationship("Cliente", back_populates="processos")
    advogado_responsavel = relationship("Staff")
