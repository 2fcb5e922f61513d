# -*- coding: utf-8 -*-
"""
Rotas FastAPI para créditos de profissionais, repasses e folha mensal.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from honorarios.database import get_db
from honorarios.auth import get_current_active_user, get_admin_user
from honorarios.models.usuario import Usuario
from honorarios.schemas.credito import (
    CreditoCreate,
    CreditoRead,
    CreditoUpdate,
    PrevisaoPagamento,
    SaldoStaff,
    SolicitacaoLiberacao,
)
from honorarios.schemas.repasse import (
    Comprovante,
    FolhaRequest,
    RepasseCreate,
    RepasseLiquidado,
    ResultadoFolhaRead,
    ResumoRepasses,
)
from honorarios.schemas.titulo import TituloRead
from honorarios.services import creditos, folha, notificacoes, repasse

router = APIRouter(
    tags=["Repasses"],
    responses={404: {"description": "Não encontrado"}},
)


# --- REPASSE ---

@router.post("/staff/{staff_id}/liquidar", response_model=RepasseLiquidado)
def liquidar(
    staff_id: int,
    dados: RepasseCreate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_admin_user),
):
    comprovante = repasse.liquidar_repasse(
        db, staff_id, dados.credito_ids, dados.valor_total, usuario_id=current_user.id
    )
    # Depois do commit: notificação best-effort, nunca desfaz o repasse
    notificacoes.entregar_sem_falhar(db)
    return {"success": True, "comprovante": comprovante}


@router.get("/historico", response_model=List[TituloRead])
def read_historico(limit: int = 50, db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_user)):
    return repasse.historico_repasses(db, limite=limit)


@router.get("/historico/{titulo_id}/comprovante", response_model=Comprovante)
def read_comprovante(titulo_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_user)):
    return repasse.comprovante_de_titulo(db, titulo_id)


@router.get("/resumo", response_model=ResumoRepasses)
def read_resumo(db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_user)):
    return repasse.resumo_repasses(db)


# --- CRÉDITOS ---

@router.get("/staff/{staff_id}/saldo", response_model=SaldoStaff)
def read_saldo(staff_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return creditos.saldo_staff(db, staff_id)


@router.get("/staff/{staff_id}/creditos", response_model=List[CreditoRead])
def read_creditos(
    staff_id: int,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_active_user),
):
    return creditos.listar_creditos(db, staff_id, status=status)


@router.post("/staff/{staff_id}/creditos", response_model=CreditoRead, status_code=status.HTTP_201_CREATED)
def create_credito(
    staff_id: int,
    dados: CreditoCreate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_admin_user),
):
    return creditos.criar_credito_manual(db, staff_id, **dados.dict())


@router.put("/staff/{staff_id}/creditos/{credito_id}", response_model=CreditoRead)
def update_credito(
    staff_id: int,
    credito_id: int,
    dados: CreditoUpdate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_admin_user),
):
    return creditos.atualizar_credito(db, staff_id, credito_id, **dados.dict(exclude_unset=True))


@router.delete("/staff/{staff_id}/creditos/{credito_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_credito(
    staff_id: int,
    credito_id: int,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_admin_user),
):
    creditos.excluir_credito(db, staff_id, credito_id)
    return None


@router.post("/staff/{staff_id}/creditos/previsao")
def set_previsao(
    staff_id: int,
    dados: PrevisaoPagamento,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_admin_user),
):
    total = creditos.definir_previsao_pagamento(db, staff_id, dados.credito_ids, dados.previsao_pagamento)
    return {"success": True, "atualizados": total}


@router.post("/staff/{staff_id}/creditos/{credito_id}/solicitar-liberacao", response_model=CreditoRead)
def solicitar_liberacao(
    staff_id: int,
    credito_id: int,
    dados: SolicitacaoLiberacao,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_active_user),
):
    return creditos.solicitar_liberacao(db, staff_id, credito_id, dados.motivo, usuario=current_user)


# --- FOLHA MENSAL ---

@router.post("/folha", response_model=ResultadoFolhaRead)
def run_folha(
    dados: Optional[FolhaRequest] = None,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_admin_user),
):
    referencia = dados.referencia() if dados else None
    resultado = folha.executar_folha_mensal(db, referencia)
    return {
        "count": resultado.count,
        "mes_referencia": resultado.mes_referencia,
        "creditados": resultado.creditados,
        "ignorados": resultado.ignorados,
        "falhas": resultado.falhas,
    }
