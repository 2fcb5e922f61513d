# -*- coding: utf-8 -*-
"""
Autenticação JWT e dependências de autorização por papel.

Papéis: administrador, gerente, advogado, colaborador e pendente.
Contas 'pendente' autenticam mas não acessam nenhuma rota protegida.
"""
from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from honorarios import database
from honorarios.config import Config
from honorarios.dominio import ROLES_ADMIN, ROLES_FINANCEIRO
from honorarios.models.usuario import Usuario

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_minutes: Optional[int] = None) -> str:
    """Token HS256 com `sub` = email do usuário."""
    minutos = expires_minutes or Config.ACCESS_TOKEN_EXPIRE_MINUTES
    claims = dict(data, exp=datetime.utcnow() + timedelta(minutes=minutos))
    return jwt.encode(claims, Config.SECRET_KEY, algorithm=ALGORITHM)


def _email_do_token(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, Config.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub")


def get_user(db: Session, email: str) -> Optional[Usuario]:
    return db.query(Usuario).filter(Usuario.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[Usuario]:
    usuario = get_user(db, email)
    if not usuario or not usuario.hashed_password:
        return None
    if not verify_password(password, usuario.hashed_password):
        return None
    return usuario


async def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(database.get_db)):
    email = _email_do_token(token)
    usuario = get_user(db, email) if email else None
    if usuario is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciais inválidas",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return usuario


async def get_current_active_user(current_user: Usuario = Depends(get_current_user)):
    if current_user.role == "pendente":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Sua conta está pendente de aprovação por um administrador.",
        )
    return current_user


def exigir_papel(papeis, mensagem: str):
    """Dependência que aceita apenas usuários ativos com um dos papéis informados."""
    async def _dependencia(current_user: Usuario = Depends(get_current_active_user)):
        if current_user.role not in papeis:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=mensagem)
        return current_user
    return _dependencia


get_admin_or_gerente = exigir_papel(ROLES_FINANCEIRO, "Acesso restrito a Administradores ou Gerentes.")
get_admin_user = exigir_papel(ROLES_ADMIN, "Acesso restrito a administradores.")
