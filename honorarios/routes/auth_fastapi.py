# -*- coding: utf-8 -*-
"""
Login por email/senha (formulário OAuth2) e perfil do usuário logado.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from honorarios import auth, database
from honorarios.models.usuario import Usuario
from honorarios.schemas.usuario import Token, UsuarioRead

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])


@router.post("/token", response_model=Token)
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(database.get_db)):
    # O campo 'username' do formulário carrega o email
    usuario = auth.authenticate_user(db, form_data.username, form_data.password)
    if not usuario:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email ou senha incorretos",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = auth.create_access_token({"sub": usuario.email, "role": usuario.role})
    return {"access_token": token, "token_type": "bearer", "user_info": UsuarioRead.from_orm(usuario)}


@router.get("/me", response_model=UsuarioRead)
async def read_users_me(current_user: Usuario = Depends(auth.get_current_active_user)):
    return current_user
