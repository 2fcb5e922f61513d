# -*- coding: utf-8 -*-
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class NotificacaoRead(BaseModel):
    id: int
    usuario_id: Optional[int] = None
    staff_id: Optional[int] = None
    titulo: str
    descricao: str
    categoria: str
    href: Optional[str] = None
    lida: bool
    criado_em: datetime

    class Config:
        from_attributes = True
