# -*- coding: utf-8 -*-
"""
Fixtures compartilhadas: banco SQLite em memória por teste, cenário básico
(usuários, cliente, processo, advogado e profissional de folha) e cliente HTTP.
"""

import os
from decimal import Decimal
from types import SimpleNamespace

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "chave-de-teste")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from honorarios import database
from honorarios.auth import create_access_token
from honorarios.dominio import TipoRemuneracao
from honorarios.models.cliente import Cliente
from honorarios.models.processo import Processo
from honorarios.models.staff import Staff
from honorarios.models.usuario import Usuario

from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database.Base.metadata.create_all(bind=engine)
    yield engine
    database.Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def sessao_teste(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(sessao_teste):
    session = sessao_teste()
    yield session
    session.close()


def _usuario(db, username, role):
    usuario = Usuario(
        username=username,
        email=f"{username}@escritorio.com.br",
        nome=username.capitalize(),
        role=role,
    )
    db.add(usuario)
    return usuario


@pytest.fixture
def cenario(db):
    """Escritório mínimo: um advogado SUCUMBENCIA 30% responsável por um processo e um FIXO_MENSAL."""
    admin = _usuario(db, "admin", "administrador")
    gerente = _usuario(db, "gerente", "gerente")
    advogado_login = _usuario(db, "advogado", "advogado")
    pendente = _usuario(db, "pendente", "pendente")
    db.flush()

    cliente = Cliente(nome="Maria da Silva", documento="12345678900")
    advogado = Staff(
        nome="Dr. João Souza",
        email="joao@escritorio.com.br",
        numero_oab="SP123456",
        usuario_id=advogado_login.id,
        banco="Banco do Brasil",
        agencia="0001",
        conta="12345-6",
        chave_pix="joao@escritorio.com.br",
        tipo_remuneracao=TipoRemuneracao.SUCUMBENCIA.value,
        percentual_advogado=Decimal("30"),
    )
    secretaria = Staff(
        nome="Ana Lima",
        role="employee",
        tipo_remuneracao=TipoRemuneracao.FIXO_MENSAL.value,
        valor_fixo_mensal=Decimal("3000.00"),
    )
    db.add_all([cliente, advogado, secretaria])
    db.flush()

    processo = Processo(
        numero="0001234-56.2024.8.26.0100",
        titulo="Maria da Silva x Banco XPTO",
        cliente_id=cliente.id,
        advogado_responsavel_id=advogado.id,
    )
    db.add(processo)
    db.commit()

    return SimpleNamespace(
        admin=admin,
        gerente=gerente,
        advogado_login=advogado_login,
        pendente=pendente,
        cliente=cliente,
        advogado=advogado,
        secretaria=secretaria,
        processo=processo,
    )


@pytest.fixture
def client(sessao_teste):
    def override_get_db():
        session = sessao_teste()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[database.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers(cenario):
    """headers("admin") -> cabeçalho Authorization do usuário do cenário."""
    usuarios = {
        "admin": cenario.admin,
        "gerente": cenario.gerente,
        "advogado": cenario.advogado_login,
        "pendente": cenario.pendente,
    }

    def _headers(nome):
        token = create_access_token({"sub": usuarios[nome].email})
        return {"Authorization": f"Bearer {token}"}

    return _headers
