# -*- coding: utf-8 -*-
"""
Validação de valores monetários recebidos pelos serviços.
"""

from decimal import Decimal, InvalidOperation

from honorarios.config import CENTAVOS, VALOR_MAXIMO
from honorarios.errors import RegraNegocioError


def valor_monetario(valor, rotulo: str = "valor", centavos_exatos: bool = True) -> Decimal:
    """
    Converte para Decimal e rejeita (RegraNegocioError) valores ausentes, não finitos,
    menores ou iguais a zero, acima de VALOR_MAXIMO ou, com `centavos_exatos`,
    com mais de duas casas decimais.
    """
    if valor is None:
        raise RegraNegocioError(f"Informe o {rotulo}.")
    try:
        valor = valor if isinstance(valor, Decimal) else Decimal(str(valor))
    except InvalidOperation:
        raise RegraNegocioError(f"O {rotulo} não é um número válido.")

    if not valor.is_finite():
        raise RegraNegocioError(f"O {rotulo} não é um número válido.")
    if valor <= 0:
        raise RegraNegocioError(f"O {rotulo} deve ser maior que zero.")
    if valor > VALOR_MAXIMO:
        raise RegraNegocioError(f"O {rotulo} excede o máximo permitido (R$ {VALOR_MAXIMO}).")
    if centavos_exatos and valor.quantize(CENTAVOS) != valor:
        raise RegraNegocioError(f"O {rotulo} deve ter no máximo duas casas decimais.")
    return valor
