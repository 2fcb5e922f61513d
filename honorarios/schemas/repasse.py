# -*- coding: utf-8 -*-
"""
Schemas Pydantic para repasses e folha mensal.
"""
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from datetime import date, datetime

from honorarios.config import VALOR_MAXIMO

LIMITE_VALOR = float(VALOR_MAXIMO)


class RepasseCreate(BaseModel):
    credito_ids: List[int] = Field(..., min_length=1)
    valor_total: float = Field(..., gt=0, le=LIMITE_VALOR)


class ItemComprovante(BaseModel):
    id: int
    tipo: str
    descricao: str
    valor: float


class Comprovante(BaseModel):
    titulo_id: Optional[int] = None
    staff_id: int
    nome: str
    numero_oab: Optional[str] = None
    banco: Optional[str] = None
    agencia: Optional[str] = None
    conta: Optional[str] = None
    chave_pix: Optional[str] = None
    creditos: List[ItemComprovante] = []
    valor_total: float
    data_pagamento: Optional[datetime] = None


class RepasseLiquidado(BaseModel):
    success: bool = True
    comprovante: Comprovante


class ResumoRepasses(BaseModel):
    total_disponivel: float
    total_retido: float
    total_pago_mes: float
    quantidade_staff: int


class FolhaRequest(BaseModel):
    mes: Optional[int] = Field(None, ge=1, le=12)
    ano: Optional[int] = Field(None, ge=2000, le=2100)

    @model_validator(mode="after")
    def _periodo_completo(self):
        if (self.mes is None) != (self.ano is None):
            raise ValueError("Informe mês e ano juntos.")
        return self

    def referencia(self) -> Optional[date]:
        if self.mes and self.ano:
            return date(self.ano, self.mes, 1)
        return None


class FalhaFolha(BaseModel):
    staff_id: int
    erro: str


class ResultadoFolhaRead(BaseModel):
    count: int
    mes_referencia: str
    creditados: List[int] = []
    ignorados: List[int] = []
    falhas: List[FalhaFolha] = []
