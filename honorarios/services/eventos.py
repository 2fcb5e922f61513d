# -*- coding: utf-8 -*-
"""
Livro de eventos financeiros: cria o evento, divide o valor em parcelas
(títulos a receber) e gera a comissão retida do advogado responsável.

Tudo (evento + N títulos + 0 ou 1 crédito) é gravado em uma única transação.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_DOWN
from typing import List, Optional

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from honorarios.config import CENTAVOS
from honorarios.database import unit_of_work
from honorarios.dominio import (
    EVENTOS_COM_COMISSAO,
    ORIGEM_POR_TIPO_EVENTO,
    StatusCredito,
    StatusTitulo,
    TipoCredito,
    TipoEvento,
    TipoTitulo,
)
from honorarios.errors import NotFoundError, RegraNegocioError
from honorarios.models.credito import CreditoStaff
from honorarios.models.evento_financeiro import EventoFinanceiro
from honorarios.models.processo import Processo
from honorarios.models.staff import Staff
from honorarios.models.titulo import TituloFinanceiro
from honorarios.services.compensacao import calcular_comissao, dividir_honorarios
from honorarios.services.valores import valor_monetario

logger = logging.getLogger(__name__)


@dataclass
class ResultadoEvento:
    evento: EventoFinanceiro
    titulos: List[TituloFinanceiro]
    credito: Optional[CreditoStaff]


def dividir_parcelas(valor_total: Decimal, parcelas: int) -> List[Decimal]:
    """
    Divide o valor em parcelas iguais truncadas em centavos.
    O resíduo de centavos vai para a última parcela, de modo que a soma é exata.
    """
    base = (valor_total / parcelas).quantize(CENTAVOS, rounding=ROUND_DOWN)
    valores = [base] * (parcelas - 1)
    valores.append(valor_total - base * (parcelas - 1))
    return valores


def registrar_evento(
    db: Session,
    processo_id: int,
    tipo,
    data_evento: date,
    descricao: str,
    valor_total,
    parcelas: int,
    primeiro_vencimento: date,
) -> ResultadoEvento:
    try:
        tipo = TipoEvento(tipo)
    except ValueError:
        raise RegraNegocioError(f"Tipo de evento inválido: {tipo}")

    valor_total = valor_monetario(valor_total, "valor total do evento")
    if parcelas < 1:
        raise RegraNegocioError("O número de parcelas deve ser pelo menos 1.")
    if valor_total / parcelas < CENTAVOS:
        raise RegraNegocioError("O valor de cada parcela deve ser de pelo menos R$ 0,01.")

    processo = db.query(Processo).filter(Processo.id == processo_id).first()
    if not processo:
        raise NotFoundError("Processo associado não encontrado.")

    with unit_of_work(db):
        evento = EventoFinanceiro(
            processo_id=processo.id,
            tipo=tipo.value,
            data_evento=data_evento,
            descricao=descricao,
            valor_total=valor_total,
        )
        db.add(evento)
        db.flush()  # precisa do id para vincular títulos e crédito

        origem = ORIGEM_POR_TIPO_EVENTO[tipo]
        titulos = []
        for i, valor_parcela in enumerate(dividir_parcelas(valor_total, parcelas)):
            descricao_titulo = f"{descricao} - Parcela {i + 1}/{parcelas}" if parcelas > 1 else descricao
            titulo = TituloFinanceiro(
                evento_financeiro_id=evento.id,
                processo_id=processo.id,
                cliente_id=processo.cliente_id,
                descricao=descricao_titulo,
                tipo=TipoTitulo.RECEITA.value,
                origem=origem.value,
                valor=valor_parcela,
                data_vencimento=primeiro_vencimento + relativedelta(months=i),
                status=StatusTitulo.PENDENTE.value,
            )
            db.add(titulo)
            titulos.append(titulo)

        credito = _gerar_credito_advogado(db, processo, evento, tipo, valor_total, descricao)

    logger.info(
        "Evento %s (%s) registrado no processo %s: %d parcela(s), total %s, crédito %s",
        evento.id, tipo.value, processo.id, parcelas, valor_total,
        credito.id if credito else "-",
    )
    return ResultadoEvento(evento=evento, titulos=titulos, credito=credito)


def _gerar_credito_advogado(db, processo, evento, tipo, valor_total, descricao) -> Optional[CreditoStaff]:
    if tipo not in EVENTOS_COM_COMISSAO or not processo.advogado_responsavel_id:
        return None

    advogado = db.query(Staff).filter(Staff.id == processo.advogado_responsavel_id).first()
    if not advogado:
        return None

    regra = advogado.regra_remuneracao
    comissao = calcular_comissao(valor_total, regra)
    if comissao <= 0:
        return None

    credito = CreditoStaff(
        staff_id=advogado.id,
        tipo=TipoCredito.HONORARIOS.value,
        evento_financeiro_id=evento.id,
        processo_id=processo.id,
        descricao=f"Honorários ({regra.tipo.value}): {descricao}",
        valor=comissao,
        # Fica retido até o cliente pagar o título
        status=StatusCredito.RETIDO.value,
    )
    db.add(credito)
    return credito


def obter_evento(db: Session, evento_id: int) -> EventoFinanceiro:
    evento = db.query(EventoFinanceiro).filter(EventoFinanceiro.id == evento_id).first()
    if not evento:
        raise NotFoundError("Evento financeiro não encontrado.")
    return evento


def demonstrativo_evento(db: Session, evento_id: int) -> dict:
    """Demonstrativo do evento: valor bruto, honorários do escritório (30%), parte do cliente e parcelas."""
    evento = obter_evento(db, evento_id)
    demonstrativo = dividir_honorarios(evento.valor_total)
    demonstrativo.update({
        "evento_id": evento.id,
        "processo_id": evento.processo_id,
        "tipo": evento.tipo,
        "descricao": evento.descricao,
        "data_evento": evento.data_evento,
        "parcelas": evento.titulos,
    })
    return demonstrativo
