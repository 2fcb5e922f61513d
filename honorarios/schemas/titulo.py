# -*- coding: utf-8 -*-
"""
Schemas Pydantic para títulos financeiros (contas a receber e a pagar).
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from honorarios.dominio import OrigemTitulo, StatusTitulo, TipoTitulo

from honorarios.config import VALOR_MAXIMO

LIMITE_VALOR = float(VALOR_MAXIMO)


class TituloCreate(BaseModel):
    descricao: str = Field(..., min_length=1, max_length=255)
    tipo: TipoTitulo
    origem: OrigemTitulo
    valor: float = Field(..., gt=0, le=LIMITE_VALOR)
    data_vencimento: date
    processo_id: Optional[int] = None
    status: StatusTitulo = StatusTitulo.PENDENTE


class TituloStatusUpdate(BaseModel):
    status: StatusTitulo


class TituloRead(BaseModel):
    id: int
    evento_financeiro_id: Optional[int] = None
    processo_id: Optional[int] = None
    cliente_id: Optional[int] = None
    staff_id: Optional[int] = None
    descricao: str
    tipo: str
    origem: str
    valor: float
    data_vencimento: date
    status: str
    status_efetivo: str  # PENDENTE vencido aparece como ATRASADO
    data_pagamento: Optional[datetime] = None

    class Config:
        from_attributes = True
