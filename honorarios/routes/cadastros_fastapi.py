# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o cadastro de clientes, processos e profissionais (staff).
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from honorarios.database import get_db
from honorarios.auth import get_current_active_user, get_admin_user
from honorarios.models.cliente import Cliente
from honorarios.models.processo import Processo
from honorarios.models.staff import Staff
from honorarios.models.usuario import Usuario
from honorarios.schemas.cadastro import (
    ClienteCreate, ClienteRead, ProcessoCreate, ProcessoRead, StaffCreate, StaffRead,
)
from honorarios.services import cadastros

router = APIRouter(
    tags=["Cadastros"],
    responses={404: {"description": "Não encontrado"}},
)


@router.get("/clientes", response_model=List[ClienteRead])
def read_clientes(db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return db.query(Cliente).order_by(Cliente.nome).all()


@router.post("/clientes", response_model=ClienteRead, status_code=status.HTTP_201_CREATED)
def create_cliente(dados: ClienteCreate, db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_user)):
    return cadastros.criar_cliente(db, dados.dict())


@router.get("/processos", response_model=List[ProcessoRead])
def read_processos(db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return db.query(Processo).order_by(Processo.id.desc()).all()


@router.post("/processos", response_model=ProcessoRead, status_code=status.HTTP_201_CREATED)
def create_processo(dados: ProcessoCreate, db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_user)):
    return cadastros.criar_processo(db, dados.dict())


@router.get("/staff", response_model=List[StaffRead])
def read_staff(db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return db.query(Staff).order_by(Staff.nome).all()


@router.get("/staff/{staff_id}", response_model=StaffRead)
def read_staff_member(staff_id: int, db: Session = Depends(get_db), current_user: Usuario = Depends(get_current_active_user)):
    return cadastros.obter_staff(db, staff_id)


@router.post("/staff", response_model=StaffRead, status_code=status.HTTP_201_CREATED)
def create_staff(dados: StaffCreate, db: Session = Depends(get_db), current_user: Usuario = Depends(get_admin_user)):
    return cadastros.criar_staff(db, dados.dict())
