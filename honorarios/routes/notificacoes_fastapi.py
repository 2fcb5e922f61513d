# -*- coding: utf-8 -*-
"""
Rotas FastAPI para as notificações internas do usuário logado.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from honorarios.database import get_db
from honorarios.auth import get_current_active_user, get_admin_user
from honorarios.models.usuario import Usuario
from honorarios.schemas.notificacao import NotificacaoRead
from honorarios.services import notificacoes

router = APIRouter(tags=["Notificações"])


@router.get("", response_model=List[NotificacaoRead])
def read_notificacoes(
    nao_lidas: bool = False,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_active_user),
):
    return notificacoes.listar_notificacoes(db, current_user.id, apenas_nao_lidas=nao_lidas)


@router.post("/{notificacao_id}/lida", response_model=NotificacaoRead)
def marcar_lida(notificacao_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return notificacoes.marcar_como_lida(db, notificacao_id, current_user.id)


@router.post("/outbox/processar")
def processar_outbox(db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_user)):
    """Reprocessa eventos da outbox que ainda não viraram notificação."""
    return {"entregues": notificacoes.entregar_pendentes(db)}
