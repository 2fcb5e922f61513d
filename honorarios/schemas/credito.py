# -*- coding: utf-8 -*-
"""
Schemas Pydantic para créditos de profissionais.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime

from honorarios.dominio import StatusCredito, TipoCredito

from honorarios.config import VALOR_MAXIMO

LIMITE_VALOR = float(VALOR_MAXIMO)


class CreditoCreate(BaseModel):
    descricao: str = Field(..., min_length=1, max_length=255)
    # Validado no serviço para que valor <= 0 vire erro de regra de negócio
    valor: float = Field(..., le=LIMITE_VALOR)
    tipo: TipoCredito = TipoCredito.REEMBOLSO
    status: StatusCredito = StatusCredito.DISPONIVEL
    processo_id: Optional[int] = None
    previsao_pagamento: Optional[date] = None


class CreditoUpdate(BaseModel):
    descricao: Optional[str] = Field(None, min_length=1, max_length=255)
    valor: Optional[float] = Field(None, le=LIMITE_VALOR)


class PrevisaoPagamento(BaseModel):
    credito_ids: List[int] = Field(..., min_length=1)
    previsao_pagamento: date


class SolicitacaoLiberacao(BaseModel):
    motivo: str = Field(..., min_length=1)


class CreditoRead(BaseModel):
    id: int
    staff_id: int
    tipo: str
    evento_financeiro_id: Optional[int] = None
    processo_id: Optional[int] = None
    descricao: str
    valor: float
    status: str
    data: Optional[datetime] = None
    previsao_pagamento: Optional[date] = None
    liberacao_solicitada: bool = False
    motivo_liberacao: Optional[str] = None
    mes_referencia: Optional[str] = None
    data_pagamento: Optional[datetime] = None
    pago_por_id: Optional[int] = None
    titulo_repasse_id: Optional[int] = None

    class Config:
        from_attributes = True


class SaldoStaff(BaseModel):
    staff_id: int
    disponivel: float
    retido: float
    pago: float
