# -*- coding: utf-8 -*-
"""
Configurações da aplicação lidas do ambiente (.env).
"""

import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()


class Config:
    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./database/honorarios.db")
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 8))
    FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")  # None = stderr


# Honorários contratuais do escritório sobre o valor bruto do evento.
# O restante (70%) pertence ao cliente. Usado no cálculo de comissões e nos comprovantes.
PERCENTUAL_HONORARIOS_CONTRATUAIS = Decimal("0.30")
PERCENTUAL_CLIENTE = Decimal("1") - PERCENTUAL_HONORARIOS_CONTRATUAIS

# Tolerância para divergência entre o total informado e o recalculado no repasse
TOLERANCIA_REPASSE = Decimal("0.005")

CENTAVOS = Decimal("0.01")

# Maior valor que cabe em Numeric(12, 2)
VALOR_MAXIMO = Decimal("9999999999.99")
