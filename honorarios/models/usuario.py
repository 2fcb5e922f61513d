# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Usuario (quem opera o sistema).
"""
from sqlalchemy import Column, Integer, String
from honorarios.database import Base


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(120), unique=True, index=True, nullable=False)
    nome = Column(String(120))
    hashed_password = Column(String, nullable=True)
    # administrador, gerente, advogado, colaborador ou pendente (aguardando aprovação)
    role = Column(String(30), nullable=False, default="pendente")
