# -*- coding: utf-8 -*-
"""
Motor de remuneração: cálculo puro da comissão, sem banco.
"""

from decimal import Decimal

import pytest

from honorarios.dominio import TipoRemuneracao
from honorarios.errors import RegraNegocioError
from honorarios.services.compensacao import (
    Audiencista,
    FixoMensal,
    Producao,
    QuotaLitis,
    Sucumbencia,
    calcular_comissao,
    dividir_honorarios,
    montar_regra,
)


def test_sucumbencia_aplica_percentual_sobre_honorarios_do_escritorio():
    # 10000 * 0.30 * 30% = 900
    assert calcular_comissao(Decimal("10000"), Sucumbencia(Decimal("30"))) == Decimal("900.00")


def test_quota_litis_usa_a_mesma_base():
    assert calcular_comissao(Decimal("2500"), QuotaLitis(Decimal("50"))) == Decimal("375.00")


def test_comissao_arredonda_para_centavos():
    # 333.33 * 0.30 * 0.15 = 14.99985
    assert calcular_comissao(Decimal("333.33"), Sucumbencia(Decimal("15"))) == Decimal("15.00")


def test_percentual_nao_definido_nao_gera_comissao():
    assert calcular_comissao(Decimal("10000"), Sucumbencia(None)) == Decimal("0")
    assert calcular_comissao(Decimal("10000"), QuotaLitis(Decimal("0"))) == Decimal("0")


@pytest.mark.parametrize("regra", [
    FixoMensal(Decimal("3000")),
    Audiencista(Decimal("150")),
    Producao(Decimal("80"), Decimal("50"), Decimal("30")),
    None,
])
def test_regras_sem_comissao_por_evento(regra):
    assert calcular_comissao(Decimal("10000"), regra) == Decimal("0")


def test_variante_desconhecida_e_erro_de_programacao():
    with pytest.raises(TypeError):
        calcular_comissao(Decimal("100"), object())


@pytest.mark.parametrize("tipo", list(TipoRemuneracao))
def test_toda_remuneracao_cadastrada_tem_regra(tipo):
    regra = montar_regra(tipo.value, percentual_advogado=10, valor_fixo_mensal=1000, valor_por_audiencia=100)
    assert regra.tipo is tipo
    # Nunca levanta para tipos conhecidos
    calcular_comissao(Decimal("100"), regra)


def test_montar_regra_converte_para_decimal():
    regra = montar_regra("SUCUMBENCIA", percentual_advogado=12.5)
    assert regra == Sucumbencia(Decimal("12.5"))


def test_montar_regra_sem_tipo_retorna_none():
    assert montar_regra(None) is None


def test_montar_regra_tipo_desconhecido():
    with pytest.raises(RegraNegocioError):
        montar_regra("COMISSAO_MAGICA")


def test_dividir_honorarios_30_70():
    divisao = dividir_honorarios(Decimal("1000.01"))
    assert divisao["honorarios_escritorio"] == Decimal("300.00")
    assert divisao["valor_cliente"] == Decimal("700.01")
    assert divisao["honorarios_escritorio"] + divisao["valor_cliente"] == Decimal("1000.01")
