# -*- coding: utf-8 -*-
"""
Administração manual de créditos de um profissional.

Operações independentes do livro de eventos: não tocam títulos e não
participam da liberação em cascata. Também é por aqui que entram os créditos
por ato praticado (AUDIENCISTA e PRODUCAO).
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from honorarios.database import unit_of_work
from honorarios.dominio import ROLES_ADMIN, StatusCredito, TipoCredito
from honorarios.errors import NotFoundError, RegraNegocioError, UnauthorizedError
from honorarios.models.credito import CreditoStaff
from honorarios.models.staff import Staff
from honorarios.services.valores import valor_monetario

logger = logging.getLogger(__name__)


def _obter_staff(db: Session, staff_id: int) -> Staff:
    staff = db.query(Staff).filter(Staff.id == staff_id).first()
    if not staff:
        raise NotFoundError("Profissional não encontrado.")
    return staff


def obter_credito(db: Session, staff_id: int, credito_id: int) -> CreditoStaff:
    credito = (
        db.query(CreditoStaff)
        .filter(CreditoStaff.id == credito_id, CreditoStaff.staff_id == staff_id)
        .first()
    )
    if not credito:
        raise NotFoundError("Crédito não encontrado.")
    return credito


def _valor_positivo(valor) -> Decimal:
    return valor_monetario(valor, "valor do crédito")


def listar_creditos(db: Session, staff_id: int, status: Optional[str] = None) -> List[CreditoStaff]:
    _obter_staff(db, staff_id)
    query = db.query(CreditoStaff).filter(CreditoStaff.staff_id == staff_id)
    if status:
        query = query.filter(CreditoStaff.status == status)
    return query.order_by(CreditoStaff.data.desc()).all()


def saldo_staff(db: Session, staff_id: int) -> dict:
    """Totais por status (disponível, retido, pago). Apenas para exibição."""
    _obter_staff(db, staff_id)
    linhas = (
        db.query(CreditoStaff.status, func.sum(CreditoStaff.valor))
        .filter(CreditoStaff.staff_id == staff_id)
        .group_by(CreditoStaff.status)
        .all()
    )
    totais = {status: Decimal(str(total or 0)) for status, total in linhas}
    return {
        "staff_id": staff_id,
        "disponivel": totais.get(StatusCredito.DISPONIVEL.value, Decimal("0")),
        "retido": totais.get(StatusCredito.RETIDO.value, Decimal("0")),
        "pago": totais.get(StatusCredito.PAGO.value, Decimal("0")),
    }


def criar_credito_manual(
    db: Session,
    staff_id: int,
    descricao: str,
    valor,
    tipo=TipoCredito.REEMBOLSO,
    status=StatusCredito.DISPONIVEL,
    processo_id: Optional[int] = None,
    previsao_pagamento: Optional[date] = None,
) -> CreditoStaff:
    valor = _valor_positivo(valor)
    try:
        tipo = TipoCredito(tipo)
        status = StatusCredito(status)
    except ValueError as e:
        raise RegraNegocioError(f"Valor inválido: {e}")
    if status is StatusCredito.PAGO:
        raise RegraNegocioError("Um crédito só pode ser marcado como PAGO por um repasse.")
    if not (descricao or "").strip():
        raise RegraNegocioError("Informe a descrição do crédito.")

    staff = _obter_staff(db, staff_id)
    with unit_of_work(db):
        credito = CreditoStaff(
            staff_id=staff.id,
            tipo=tipo.value,
            descricao=descricao.strip(),
            valor=valor,
            status=status.value,
            processo_id=processo_id,
            previsao_pagamento=previsao_pagamento,
        )
        db.add(credito)

    logger.info("Crédito manual %s (%s, %s) lançado para staff %s", credito.id, tipo.value, valor, staff.id)
    return credito


def atualizar_credito(
    db: Session,
    staff_id: int,
    credito_id: int,
    descricao: Optional[str] = None,
    valor=None,
) -> CreditoStaff:
    credito = obter_credito(db, staff_id, credito_id)
    if credito.status == StatusCredito.PAGO.value:
        raise RegraNegocioError("Créditos já pagos não podem ser alterados.")

    novo_valor = _valor_positivo(valor) if valor is not None else None
    with unit_of_work(db):
        if descricao is not None:
            credito.descricao = descricao
        if novo_valor is not None:
            credito.valor = novo_valor

    logger.info("Crédito %s do staff %s atualizado", credito.id, staff_id)
    return credito


def excluir_credito(db: Session, staff_id: int, credito_id: int) -> None:
    # Qualquer status pode ser excluído, inclusive PAGO (o título do repasse permanece).
    credito = obter_credito(db, staff_id, credito_id)
    if credito.status == StatusCredito.PAGO.value:
        logger.warning("Excluindo crédito %s já PAGO do staff %s", credito.id, staff_id)
    with unit_of_work(db):
        db.delete(credito)
    logger.info("Crédito %s do staff %s excluído", credito_id, staff_id)


def definir_previsao_pagamento(db: Session, staff_id: int, credito_ids: List[int], previsao: date) -> int:
    ids = list(dict.fromkeys(credito_ids or []))
    if not ids:
        raise RegraNegocioError("Selecione ao menos um crédito.")
    _obter_staff(db, staff_id)

    with unit_of_work(db):
        creditos = (
            db.query(CreditoStaff)
            .filter(CreditoStaff.id.in_(ids), CreditoStaff.staff_id == staff_id)
            .all()
        )
        if len(creditos) != len(ids):
            raise NotFoundError("Um ou mais créditos não foram encontrados.")
        for credito in creditos:
            credito.previsao_pagamento = previsao

    logger.info("Previsão %s definida para %d crédito(s) do staff %s", previsao, len(ids), staff_id)
    return len(ids)


def solicitar_liberacao(db: Session, staff_id: int, credito_id: int, motivo: str, usuario=None) -> CreditoStaff:
    """
    Marca um crédito RETIDO como 'liberação solicitada'. Não altera o status.

    Com `usuario`, só o próprio profissional (login vinculado ao staff) ou um
    administrador pode pedir.
    """
    staff = _obter_staff(db, staff_id)
    if usuario is not None and usuario.role not in ROLES_ADMIN and staff.usuario_id != usuario.id:
        raise UnauthorizedError("Somente o próprio profissional pode solicitar a liberação dos seus créditos.")
    credito = obter_credito(db, staff_id, credito_id)
    if credito.status != StatusCredito.RETIDO.value:
        raise RegraNegocioError("Somente créditos retidos podem ter liberação solicitada.")
    if not (motivo or "").strip():
        raise RegraNegocioError("Informe o motivo da solicitação.")

    with unit_of_work(db):
        credito.liberacao_solicitada = True
        credito.motivo_liberacao = motivo.strip()

    logger.info("Liberação antecipada solicitada para crédito %s (staff %s)", credito.id, staff_id)
    return credito
