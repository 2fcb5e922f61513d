# -*- coding: utf-8 -*-
"""
Schemas Pydantic de usuários e do token de acesso.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Literal, Optional

Papel = Literal["administrador", "gerente", "advogado", "colaborador", "pendente"]


class UsuarioRead(BaseModel):
    id: int
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    nome: Optional[str] = None
    role: Papel

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_info: UsuarioRead
