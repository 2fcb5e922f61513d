# -*- coding: utf-8 -*-
"""
Motor de regras de remuneração: (valor do evento, regra do profissional) -> comissão.

Função pura, sem acesso ao banco.

O escritório cobra honorários contratuais fixos de 30% sobre o valor bruto do
evento (os outros 70% são do cliente). Nas regras SUCUMBENCIA e QUOTA_LITIS o
advogado recebe um percentual dessa base de 30%:

    comissao = valor_total * 0.30 * (percentual_advogado / 100)

FIXO_MENSAL, AUDIENCISTA e PRODUCAO nunca geram crédito a partir de eventos.
FIXO_MENSAL é creditado pela folha mensal (services/folha.py); AUDIENCISTA e
PRODUCAO são lançados manualmente por ato praticado (services/creditos.py).
Essa assimetria é intencional.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from honorarios.config import PERCENTUAL_HONORARIOS_CONTRATUAIS, PERCENTUAL_CLIENTE, CENTAVOS
from honorarios.dominio import TipoRemuneracao
from honorarios.errors import RegraNegocioError


@dataclass(frozen=True)
class Sucumbencia:
    percentual_advogado: Optional[Decimal]
    percentual_escritorio: Optional[Decimal] = None
    tipo = TipoRemuneracao.SUCUMBENCIA


@dataclass(frozen=True)
class QuotaLitis:
    percentual_advogado: Optional[Decimal]
    percentual_escritorio: Optional[Decimal] = None
    tipo = TipoRemuneracao.QUOTA_LITIS


@dataclass(frozen=True)
class FixoMensal:
    valor_fixo_mensal: Optional[Decimal]
    tipo = TipoRemuneracao.FIXO_MENSAL


@dataclass(frozen=True)
class Audiencista:
    valor_por_audiencia: Optional[Decimal]
    tipo = TipoRemuneracao.AUDIENCISTA


@dataclass(frozen=True)
class Producao:
    preco_redacao: Optional[Decimal] = None
    preco_diligencia: Optional[Decimal] = None
    preco_outros: Optional[Decimal] = None
    tipo = TipoRemuneracao.PRODUCAO


RegraRemuneracao = Union[Sucumbencia, QuotaLitis, FixoMensal, Audiencista, Producao]


def _dec(valor) -> Optional[Decimal]:
    if valor is None:
        return None
    return valor if isinstance(valor, Decimal) else Decimal(str(valor))


def montar_regra(tipo, **campos) -> Optional[RegraRemuneracao]:
    """Converte o cadastro (tipo + colunas soltas) na variante tipada correspondente."""
    if not tipo:
        return None
    try:
        tipo = TipoRemuneracao(tipo)
    except ValueError:
        raise RegraNegocioError(f"Tipo de remuneração desconhecido: {tipo}")

    if tipo is TipoRemuneracao.SUCUMBENCIA:
        return Sucumbencia(_dec(campos.get("percentual_advogado")), _dec(campos.get("percentual_escritorio")))
    if tipo is TipoRemuneracao.QUOTA_LITIS:
        return QuotaLitis(_dec(campos.get("percentual_advogado")), _dec(campos.get("percentual_escritorio")))
    if tipo is TipoRemuneracao.FIXO_MENSAL:
        return FixoMensal(_dec(campos.get("valor_fixo_mensal")))
    if tipo is TipoRemuneracao.AUDIENCISTA:
        return Audiencista(_dec(campos.get("valor_por_audiencia")))
    if tipo is TipoRemuneracao.PRODUCAO:
        return Producao(
            _dec(campos.get("preco_redacao")),
            _dec(campos.get("preco_diligencia")),
            _dec(campos.get("preco_outros")),
        )
    raise RegraNegocioError(f"Tipo de remuneração sem regra: {tipo}")


def calcular_comissao(valor_total, regra: Optional[RegraRemuneracao]) -> Decimal:
    """
    Comissão devida ao advogado responsável por um evento financeiro.

    Retorna Decimal("0") quando a regra não deriva de eventos, quando o
    percentual não está definido ou quando o resultado não é positivo.
    O valor é arredondado para centavos (ROUND_HALF_UP).
    """
    valor_total = _dec(valor_total)
    zero = Decimal("0")

    if regra is None:
        return zero
    if isinstance(regra, (Sucumbencia, QuotaLitis)):
        if not regra.percentual_advogado:
            return zero
        comissao = valor_total * PERCENTUAL_HONORARIOS_CONTRATUAIS * (regra.percentual_advogado / Decimal("100"))
        comissao = comissao.quantize(CENTAVOS, rounding=ROUND_HALF_UP)
        return comissao if comissao > 0 else zero
    if isinstance(regra, (FixoMensal, Audiencista, Producao)):
        return zero
    raise TypeError(f"Regra de remuneração não suportada: {regra!r}")


def dividir_honorarios(valor_bruto) -> dict:
    """Separa o valor bruto em honorários do escritório (30%) e parte do cliente (70%)."""
    valor_bruto = _dec(valor_bruto)
    escritorio = (valor_bruto * PERCENTUAL_HONORARIOS_CONTRATUAIS).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    return {
        "valor_bruto": valor_bruto,
        "honorarios_escritorio": escritorio,
        "valor_cliente": valor_bruto - escritorio,
        "percentual_escritorio": PERCENTUAL_HONORARIOS_CONTRATUAIS,
        "percentual_cliente": PERCENTUAL_CLIENTE,
    }
