# -*- coding: utf-8 -*-
"""
Modelos SQLAlchemy para notificações internas e para a fila (outbox) de eventos de domínio.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Text, JSON
from honorarios.database import Base


class Notificacao(Base):
    __tablename__ = "notificacoes"

    id = Column(Integer, primary_key=True, index=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id"), nullable=True, index=True)
    staff_id = Column(Integer, ForeignKey("staff.id"), nullable=True, index=True)
    titulo = Column(String(150), nullable=False)
    descricao = Column(Text, nullable=False)
    categoria = Column(String(20), default="info")  # info, finance, deadline...
    href = Column(String(255), default="#")
    lida = Column(Boolean, default=False)
    criado_em = Column(DateTime, default=datetime.utcnow)


class EventoOutbox(Base):
    """
    Evento gravado na mesma transação da operação financeira.
    Um consumidor separado entrega a notificação; falhas ficam registradas para nova tentativa.
    """
    __tablename__ = "eventos_outbox"

    id = Column(Integer, primary_key=True, index=True)
    tipo = Column(String(40), nullable=False)
    payload = Column(JSON, nullable=False)
    criado_em = Column(DateTime, default=datetime.utcnow)
    entregue_em = Column(DateTime, nullable=True, index=True)
    tentativas = Column(Integer, default=0)
    ultimo_erro = Column(Text, nullable=True)
