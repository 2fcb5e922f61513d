# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI do back-office financeiro do escritório.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from honorarios.config import Config
from honorarios.database import engine, Base
from honorarios.errors import HonorariosError

# Importa os modelos para registrar todas as tabelas no metadata
from honorarios.models import usuario, cliente, processo, staff, evento_financeiro, titulo, credito, notificacao  # noqa: F401

from honorarios.routes import (
    auth_fastapi, cadastros_fastapi, financeiro_fastapi, notificacoes_fastapi, repasses_fastapi,
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=Config.LOG_FILE,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Cria as tabelas e o administrador inicial
    import create_first_user

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tabelas criadas com sucesso!")
    except Exception as e:
        logger.error(f"Erro ao criar tabelas: {e}")
    create_first_user.create_first_user()
    yield


env = Config.ENVIRONMENT

app = FastAPI(
    title="API Honorários & Repasses",
    description="Back-office financeiro: eventos, títulos, comissões, repasses e folha",
    version="1.0.0",
    docs_url="/docs" if env != "production" else None,
    redoc_url="/redoc" if env != "production" else None,
    openapi_url="/openapi.json" if env != "production" else None,
    lifespan=lifespan,
)

origins = [
    Config.FRONTEND_URL,
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HonorariosError)
async def honorarios_error_handler(request: Request, exc: HonorariosError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Montagem dos routers
app.include_router(auth_fastapi.router)
app.include_router(cadastros_fastapi.router, prefix="/api/v1/cadastros")
app.include_router(financeiro_fastapi.router, prefix="/api/v1/financeiro")
app.include_router(repasses_fastapi.router, prefix="/api/v1/repasses")
app.include_router(notificacoes_fastapi.router, prefix="/api/v1/notificacoes")


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Honorários & Repasses",
        "documentacao": "/docs",
        "endpoints": [
            {"financeiro": "/api/v1/financeiro"},
            {"repasses": "/api/v1/repasses"},
            {"cadastros": "/api/v1/cadastros"},
            {"notificacoes": "/api/v1/notificacoes"},
        ]
    }
