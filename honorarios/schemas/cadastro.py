# -*- coding: utf-8 -*-
"""
Schemas Pydantic para o cadastro de clientes, processos e profissionais.
"""
from pydantic import BaseModel, Field
from typing import Optional

from honorarios.dominio import TipoRemuneracao


class ClienteCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=150)
    documento: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = None
    telefone: Optional[str] = None


class ClienteRead(ClienteCreate):
    id: int

    class Config:
        from_attributes = True


class ProcessoCreate(BaseModel):
    titulo: str = Field(..., min_length=1, max_length=200)
    numero: Optional[str] = Field(None, max_length=30)
    cliente_id: int
    advogado_responsavel_id: Optional[int] = None


class ProcessoRead(ProcessoCreate):
    id: int

    class Config:
        from_attributes = True


class StaffBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=150)
    email: Optional[str] = None
    role: str = "lawyer"
    numero_oab: Optional[str] = None
    usuario_id: Optional[int] = None
    banco: Optional[str] = None
    agencia: Optional[str] = None
    conta: Optional[str] = None
    chave_pix: Optional[str] = None
    tipo_remuneracao: Optional[TipoRemuneracao] = None
    percentual_escritorio: Optional[float] = Field(None, ge=0, le=100)
    percentual_advogado: Optional[float] = Field(None, ge=0, le=100)
    valor_fixo_mensal: Optional[float] = Field(None, ge=0)
    valor_por_audiencia: Optional[float] = Field(None, ge=0)
    preco_redacao: Optional[float] = Field(None, ge=0)
    preco_diligencia: Optional[float] = Field(None, ge=0)
    preco_outros: Optional[float] = Field(None, ge=0)


class StaffCreate(StaffBase):
    pass


class StaffRead(StaffBase):
    id: int
    tipo_remuneracao: Optional[str] = None

    class Config:
        from_attributes = True
