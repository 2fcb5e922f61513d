# -*- coding: utf-8 -*-
"""
Configuração do banco de dados SQLAlchemy e da unidade de trabalho.
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from honorarios.config import Config
from honorarios.errors import PersistenceError

logger = logging.getLogger(__name__)

DATABASE_URL = Config.DATABASE_URL

# Se for PostgreSQL no Render/Heroku, ajusta o prefixo
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

# Garante a pasta do arquivo SQLite (ex: ./database/honorarios.db)
if DATABASE_URL.startswith("sqlite:///"):
    caminho = DATABASE_URL[len("sqlite:///"):]
    if caminho and caminho != ":memory:":
        Path(caminho).parent.mkdir(parents=True, exist_ok=True)

engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    # Verifica se a conexão está viva antes de usar
    pool_pre_ping=True,
    pool_recycle=3600,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session):
    """
    Agrupa todas as escritas de uma operação em um único commit.

    Commit ao sair do bloco; qualquer exceção desfaz tudo (rollback).
    Falhas do banco viram PersistenceError para o chamador repetir a operação inteira.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Rollback da unidade de trabalho: %s", e, exc_info=True)
        raise PersistenceError("Falha ao gravar a operação. Nenhuma alteração foi aplicada.") from e
    except Exception:
        db.rollback()
        raise
