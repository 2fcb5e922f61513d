# -*- coding: utf-8 -*-
"""
Schemas Pydantic para o registro de eventos financeiros.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date

from honorarios.dominio import TipoEvento
from .titulo import TituloRead

from honorarios.config import VALOR_MAXIMO

LIMITE_VALOR = float(VALOR_MAXIMO)


class EventoFinanceiroCreate(BaseModel):
    processo_id: int
    tipo: TipoEvento
    data_evento: date
    descricao: str = Field(..., min_length=1, max_length=200)
    valor_total: float = Field(..., gt=0, le=LIMITE_VALOR)
    parcelas: int = Field(1, ge=1, le=360)
    primeiro_vencimento: date


class EventoFinanceiroRead(BaseModel):
    id: int
    processo_id: int
    tipo: str
    data_evento: date
    descricao: str
    valor_total: float

    class Config:
        from_attributes = True


class EventoRegistrado(BaseModel):
    success: bool = True
    message: str
    evento_id: int
    titulos_ids: List[int]
    credito_id: Optional[int] = None


class DemonstrativoEvento(BaseModel):
    evento_id: int
    processo_id: int
    tipo: str
    descricao: str
    data_evento: date
    valor_bruto: float
    honorarios_escritorio: float
    valor_cliente: float
    percentual_escritorio: float
    percentual_cliente: float
    parcelas: List[TituloRead] = []

    class Config:
        from_attributes = True
