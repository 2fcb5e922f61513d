# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Cliente.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from honorarios.database import Base


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(150), nullable=False)
    documento = Column(String(20), unique=True, index=True, nullable=True)  # CPF/CNPJ
    email = Column(String(120), nullable=True)
    telefone = Column(String(20), nullable=True)
    criado_em = Column(DateTime, default=datetime.utcnow)

    processos = relationship("Processo", back_populates="cliente")
