# -*- coding: utf-8 -*-
"""
Títulos financeiros: lançamento manual, baixa/estorno de status e exclusão.

Ao mudar o status de um título vinculado a um evento, os créditos de todos os
profissionais com o mesmo evento_financeiro_id acompanham:
PAGO libera (DISPONIVEL), qualquer outro status volta a reter (RETIDO).

A liberação é por evento, não por parcela: pagar qualquer uma das parcelas
libera todos os créditos do evento. Créditos já PAGOS nunca são alterados.
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from honorarios.database import unit_of_work
from honorarios.dominio import OrigemTitulo, StatusCredito, StatusTitulo, TipoTitulo
from honorarios.errors import NotFoundError, RegraNegocioError
from honorarios.models.credito import CreditoStaff
from honorarios.models.processo import Processo
from honorarios.models.titulo import TituloFinanceiro
from honorarios.services.valores import valor_monetario

logger = logging.getLogger(__name__)


def obter_titulo(db: Session, titulo_id: int) -> TituloFinanceiro:
    titulo = db.query(TituloFinanceiro).filter(TituloFinanceiro.id == titulo_id).first()
    if not titulo:
        raise NotFoundError("Título financeiro não encontrado.")
    return titulo


def listar_titulos(
    db: Session,
    tipo: Optional[str] = None,
    status: Optional[str] = None,
    origem: Optional[str] = None,
    processo_id: Optional[int] = None,
    evento_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
) -> List[TituloFinanceiro]:
    query = db.query(TituloFinanceiro)
    if tipo:
        query = query.filter(TituloFinanceiro.tipo == tipo)
    if origem:
        query = query.filter(TituloFinanceiro.origem == origem)
    if processo_id:
        query = query.filter(TituloFinanceiro.processo_id == processo_id)
    if evento_id:
        query = query.filter(TituloFinanceiro.evento_financeiro_id == evento_id)
    if status == StatusTitulo.ATRASADO.value:
        # ATRASADO gravado explicitamente ou PENDENTE vencido
        query = query.filter(
            (TituloFinanceiro.status == StatusTitulo.ATRASADO.value)
            | ((TituloFinanceiro.status == StatusTitulo.PENDENTE.value)
               & (TituloFinanceiro.data_vencimento < date.today()))
        )
    elif status:
        query = query.filter(TituloFinanceiro.status == status)
    return query.order_by(TituloFinanceiro.data_vencimento).offset(skip).limit(limit).all()


def criar_titulo_manual(
    db: Session,
    descricao: str,
    tipo,
    origem,
    valor,
    data_vencimento: date,
    processo_id: Optional[int] = None,
    status=StatusTitulo.PENDENTE,
) -> TituloFinanceiro:
    """Lançamento avulso (aluguel, custas, impostos...). Nunca tem evento vinculado."""
    try:
        tipo = TipoTitulo(tipo)
        origem = OrigemTitulo(origem)
        status = StatusTitulo(status)
    except ValueError as e:
        raise RegraNegocioError(f"Valor inválido: {e}")

    valor = valor_monetario(valor, "valor do título")

    cliente_id = None
    if processo_id:
        processo = db.query(Processo).filter(Processo.id == processo_id).first()
        if not processo:
            raise NotFoundError("Processo associado não encontrado.")
        cliente_id = processo.cliente_id

    with unit_of_work(db):
        titulo = TituloFinanceiro(
            processo_id=processo_id,
            cliente_id=cliente_id,
            descricao=descricao,
            tipo=tipo.value,
            origem=origem.value,
            valor=valor,
            data_vencimento=data_vencimento,
            status=status.value,
            data_pagamento=datetime.utcnow() if status is StatusTitulo.PAGO else None,
        )
        db.add(titulo)

    logger.info("Título manual %s criado (%s/%s, %s)", titulo.id, tipo.value, origem.value, valor)
    return titulo


def definir_status_titulo(db: Session, titulo_id: int, novo_status) -> TituloFinanceiro:
    try:
        novo_status = StatusTitulo(novo_status)
    except ValueError:
        raise RegraNegocioError(f"Status inválido: {novo_status}")

    titulo = obter_titulo(db, titulo_id)

    with unit_of_work(db):
        titulo.status = novo_status.value
        titulo.data_pagamento = datetime.utcnow() if novo_status is StatusTitulo.PAGO else None

        afetados = 0
        if titulo.evento_financeiro_id:
            status_credito = (
                StatusCredito.DISPONIVEL if novo_status is StatusTitulo.PAGO else StatusCredito.RETIDO
            )
            afetados = (
                db.query(CreditoStaff)
                .filter(
                    CreditoStaff.evento_financeiro_id == titulo.evento_financeiro_id,
                    CreditoStaff.status != StatusCredito.PAGO.value,
                )
                .update({CreditoStaff.status: status_credito.value}, synchronize_session="fetch")
            )

    logger.info(
        "Título %s -> %s (evento %s, %d crédito(s) atualizados)",
        titulo.id, novo_status.value, titulo.evento_financeiro_id or "-", afetados,
    )
    return titulo


def excluir_titulo(db: Session, titulo_id: int) -> None:
    titulo = obter_titulo(db, titulo_id)
    with unit_of_work(db):
        # Créditos pagos por este repasse perdem apenas a referência ao título
        db.query(CreditoStaff).filter(CreditoStaff.titulo_repasse_id == titulo.id).update(
            {CreditoStaff.titulo_repasse_id: None}, synchronize_session="fetch"
        )
        db.delete(titulo)
    logger.info("Título %s excluído", titulo_id)
