# -*- coding: utf-8 -*-
"""
Exceções de domínio do módulo financeiro.

As rotas traduzem cada classe para um status HTTP (ver main.py); os serviços
nunca levantam HTTPException diretamente.
"""


class HonorariosError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(HonorariosError):
    status_code = 404


class RegraNegocioError(HonorariosError):
    """Entrada rejeitada antes de qualquer escrita (valor <= 0, parcelas < 1...)."""
    status_code = 422


class UnauthorizedError(HonorariosError):
    status_code = 403


class ConflictError(HonorariosError):
    """O estado mudou desde a leitura (ex: crédito já pago por outro repasse)."""
    status_code = 409


class PersistenceError(HonorariosError):
    status_code = 503


class NotificationDeliveryError(HonorariosError):
    status_code = 502
