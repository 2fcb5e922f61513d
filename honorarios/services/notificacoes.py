# -*- coding: utf-8 -*-
"""
Notificações pós-commit via outbox.

A operação financeira só grava um EventoOutbox dentro da própria transação.
`entregar_pendentes` roda depois do commit (ou por um agendador), transforma
cada evento em Notificacao e marca como entregue. Falha de entrega é registrada
no próprio evento e nunca desfaz nem repete a operação financeira.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from honorarios.errors import NotFoundError, NotificationDeliveryError
from honorarios.models.notificacao import EventoOutbox, Notificacao
from honorarios.models.staff import Staff

logger = logging.getLogger(__name__)

REPASSE_LIQUIDADO = "REPASSE_LIQUIDADO"
MAX_TENTATIVAS = 5


def registrar_evento_outbox(db: Session, tipo: str, payload: dict) -> EventoOutbox:
    """Deve ser chamado dentro da unit_of_work da operação que gerou o evento."""
    evento = EventoOutbox(tipo=tipo, payload=payload)
    db.add(evento)
    return evento


def _formatar_moeda(valor) -> str:
    texto = f"{float(valor):,.2f}"
    return "R$ " + texto.replace(",", "X").replace(".", ",").replace("X", ".")


def _montar_notificacao(db: Session, evento: EventoOutbox) -> Notificacao:
    if evento.tipo != REPASSE_LIQUIDADO:
        raise NotificationDeliveryError(f"Tipo de evento sem notificação: {evento.tipo}")

    payload = evento.payload or {}
    staff_id = payload.get("staff_id")
    staff = db.query(Staff).filter(Staff.id == staff_id).first()
    if not staff:
        raise NotificationDeliveryError(f"Profissional {staff_id} não encontrado para notificação.")

    return Notificacao(
        usuario_id=staff.usuario_id,
        staff_id=staff.id,
        titulo="Repasse realizado",
        descricao=(
            f"Um repasse de {_formatar_moeda(payload.get('valor_total', 0))} "
            f"referente a {payload.get('quantidade_creditos', 0)} crédito(s) foi liquidado."
        ),
        categoria="finance",
        href="/dashboard/repasses",
    )


def entregar_pendentes(db: Session, limite: Optional[int] = 100) -> int:
    """Entrega eventos pendentes da outbox. Retorna quantos foram entregues."""
    pendentes = (
        db.query(EventoOutbox)
        .filter(EventoOutbox.entregue_em.is_(None), EventoOutbox.tentativas < MAX_TENTATIVAS)
        .order_by(EventoOutbox.id)
        .limit(limite)
        .all()
    )

    entregues = 0
    for evento in pendentes:
        try:
            db.add(_montar_notificacao(db, evento))
            evento.entregue_em = datetime.utcnow()
            evento.tentativas = (evento.tentativas or 0) + 1
            db.commit()
            entregues += 1
        except (NotificationDeliveryError, SQLAlchemyError) as e:
            db.rollback()
            logger.warning("Falha ao entregar notificação do evento outbox %s: %s", evento.id, e)
            try:
                evento.tentativas = (evento.tentativas or 0) + 1
                evento.ultimo_erro = str(e)[:500]
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                logger.error("Não foi possível registrar a falha do evento outbox %s", evento.id, exc_info=True)

    if entregues:
        logger.info("%d notificação(ões) entregue(s)", entregues)
    return entregues


def entregar_sem_falhar(db: Session) -> None:
    """Entrega best-effort logo após um commit financeiro; nunca propaga erro."""
    try:
        entregar_pendentes(db)
    except Exception:
        db.rollback()
        logger.error("Erro inesperado ao entregar notificações", exc_info=True)


def listar_notificacoes(db: Session, usuario_id: int, apenas_nao_lidas: bool = False):
    query = db.query(Notificacao).filter(Notificacao.usuario_id == usuario_id)
    if apenas_nao_lidas:
        query = query.filter(Notificacao.lida.is_(False))
    return query.order_by(Notificacao.criado_em.desc()).limit(50).all()


def marcar_como_lida(db: Session, notificacao_id: int, usuario_id: int) -> Notificacao:
    notificacao = (
        db.query(Notificacao)
        .filter(Notificacao.id == notificacao_id, Notificacao.usuario_id == usuario_id)
        .first()
    )
    if not notificacao:
        raise NotFoundError("Notificação não encontrada.")
    notificacao.lida = True
    db.commit()
    return notificacao
