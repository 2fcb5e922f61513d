# -*- coding: utf-8 -*-
"""
Vocabulário do domínio financeiro (tipos, status e origens).

Os modelos gravam o `.value` de cada enum em colunas String; como as classes
herdam de `str`, comparações diretas com o texto gravado funcionam.
"""

import enum


class TipoEvento(str, enum.Enum):
    ACORDO = "ACORDO"
    SENTENCA = "SENTENCA"
    EXECUCAO = "EXECUCAO"
    CONTRATO = "CONTRATO"
    CUSTAS = "CUSTAS"
    PERICIA = "PERICIA"
    DESLOCAMENTO = "DESLOCAMENTO"
    ADICIONAL = "ADICIONAL"


class TipoTitulo(str, enum.Enum):
    RECEITA = "RECEITA"
    DESPESA = "DESPESA"


class StatusTitulo(str, enum.Enum):
    PENDENTE = "PENDENTE"
    PAGO = "PAGO"
    ATRASADO = "ATRASADO"


class OrigemTitulo(str, enum.Enum):
    ACORDO = "ACORDO"
    SENTENCA = "SENTENCA"
    HONORARIOS_CONTRATUAIS = "HONORARIOS_CONTRATUAIS"
    SUCUMBENCIA = "SUCUMBENCIA"
    CUSTAS_PROCESSUAIS = "CUSTAS_PROCESSUAIS"
    HONORARIOS_PAGOS = "HONORARIOS_PAGOS"
    SALARIOS_PROLABORE = "SALARIOS_PROLABORE"
    ALUGUEL_CONTAS = "ALUGUEL_CONTAS"
    INFRAESTRUTURA_TI = "INFRAESTRUTURA_TI"
    MARKETING_PUBLICIDADE = "MARKETING_PUBLICIDADE"
    IMPOSTOS_TAXAS = "IMPOSTOS_TAXAS"
    MATERIAL_ESCRITORIO = "MATERIAL_ESCRITORIO"
    SERVICOS_TERCEIROS = "SERVICOS_TERCEIROS"
    OUTRAS_DESPESAS = "OUTRAS_DESPESAS"
    PERICIA = "PERICIA"
    DESLOCAMENTO = "DESLOCAMENTO"
    ADICIONAL = "ADICIONAL"


class StatusCredito(str, enum.Enum):
    RETIDO = "RETIDO"
    DISPONIVEL = "DISPONIVEL"
    PAGO = "PAGO"


class TipoCredito(str, enum.Enum):
    HONORARIOS = "HONORARIOS"
    SALARIO = "SALARIO"
    REEMBOLSO = "REEMBOLSO"
    PRODUCAO = "PRODUCAO"


class TipoRemuneracao(str, enum.Enum):
    SUCUMBENCIA = "SUCUMBENCIA"
    QUOTA_LITIS = "QUOTA_LITIS"
    FIXO_MENSAL = "FIXO_MENSAL"
    AUDIENCISTA = "AUDIENCISTA"
    PRODUCAO = "PRODUCAO"


ORIGEM_POR_TIPO_EVENTO = {
    TipoEvento.ACORDO: OrigemTitulo.ACORDO,
    TipoEvento.SENTENCA: OrigemTitulo.SENTENCA,
    TipoEvento.EXECUCAO: OrigemTitulo.SENTENCA,
    TipoEvento.CONTRATO: OrigemTitulo.HONORARIOS_CONTRATUAIS,
    TipoEvento.CUSTAS: OrigemTitulo.CUSTAS_PROCESSUAIS,
    TipoEvento.PERICIA: OrigemTitulo.PERICIA,
    TipoEvento.DESLOCAMENTO: OrigemTitulo.DESLOCAMENTO,
    TipoEvento.ADICIONAL: OrigemTitulo.ADICIONAL,
}

# Somente estes eventos geram comissão automática para o advogado responsável
EVENTOS_COM_COMISSAO = frozenset({
    TipoEvento.ACORDO,
    TipoEvento.SENTENCA,
    TipoEvento.EXECUCAO,
    TipoEvento.CONTRATO,
})

ROLES_ADMIN = ("administrador",)
ROLES_FINANCEIRO = ("administrador", "gerente")

MESES_PT = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]
