# -*- coding: utf-8 -*-
"""
Rotas FastAPI para eventos financeiros e títulos (contas a receber / a pagar).
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from honorarios.database import get_db
from honorarios.auth import get_current_active_user, get_admin_or_gerente
from honorarios.models.usuario import Usuario
from honorarios.schemas.evento_financeiro import (
    DemonstrativoEvento,
    EventoFinanceiroCreate,
    EventoFinanceiroRead,
    EventoRegistrado,
)
from honorarios.schemas.titulo import TituloCreate, TituloRead, TituloStatusUpdate
from honorarios.services import eventos, titulos

router = APIRouter(
    tags=["Financeiro"],
    responses={404: {"description": "Não encontrado"}},
)


# --- EVENTOS FINANCEIROS ---

@router.post("/eventos", response_model=EventoRegistrado, status_code=status.HTTP_201_CREATED)
def registrar_evento(
    dados: EventoFinanceiroCreate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_active_user),
):
    resultado = eventos.registrar_evento(
        db,
        processo_id=dados.processo_id,
        tipo=dados.tipo,
        data_evento=dados.data_evento,
        descricao=dados.descricao,
        valor_total=dados.valor_total,
        parcelas=dados.parcelas,
        primeiro_vencimento=dados.primeiro_vencimento,
    )
    return {
        "success": True,
        "message": f"Evento financeiro e {len(resultado.titulos)} título(s) criados com sucesso!",
        "evento_id": resultado.evento.id,
        "titulos_ids": [t.id for t in resultado.titulos],
        "credito_id": resultado.credito.id if resultado.credito else None,
    }


@router.get("/eventos/{evento_id}", response_model=EventoFinanceiroRead)
def read_evento(evento_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return eventos.obter_evento(db, evento_id)


@router.get("/eventos/{evento_id}/demonstrativo", response_model=DemonstrativoEvento)
def read_demonstrativo(evento_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    """Valor bruto, honorários do escritório (30%) e parte do cliente (70%)."""
    return eventos.demonstrativo_evento(db, evento_id)


# --- TÍTULOS ---

@router.get("/titulos", response_model=List[TituloRead])
def read_titulos(
    skip: int = 0,
    limit: int = 100,
    tipo: Optional[str] = None,
    status: Optional[str] = None,
    origem: Optional[str] = None,
    processo_id: Optional[int] = None,
    evento_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_current_active_user),
):
    return titulos.listar_titulos(
        db, tipo=tipo, status=status, origem=origem,
        processo_id=processo_id, evento_id=evento_id, skip=skip, limit=limit,
    )


@router.get("/titulos/{titulo_id}", response_model=TituloRead)
def read_titulo(titulo_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return titulos.obter_titulo(db, titulo_id)


@router.post("/titulos", response_model=TituloRead, status_code=status.HTTP_201_CREATED)
def create_titulo(dados: TituloCreate, db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_or_gerente)):
    return titulos.criar_titulo_manual(db, **dados.dict())


@router.patch("/titulos/{titulo_id}/status", response_model=TituloRead)
def update_titulo_status(
    titulo_id: int,
    dados: TituloStatusUpdate,
    db: Session = Depends(get_db),
    current_user: Usuario = Depends(get_admin_or_gerente),
):
    return titulos.definir_status_titulo(db, titulo_id, dados.status)


@router.delete("/titulos/{titulo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_titulo(titulo_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_or_gerente)):
    titulos.excluir_titulo(db, titulo_id)
    return None
