# -*- coding: utf-8 -*-
"""
Repasse: liquidação atômica dos créditos DISPONIVEL de um profissional.

Em uma única transação:
  - cada crédito selecionado passa a PAGO (data_pagamento, pago_por);
  - um título DESPESA / HONORARIOS_PAGOS / PAGO é criado com a soma dos créditos;
  - um evento REPASSE_LIQUIDADO é gravado na outbox para notificar o profissional.

O total informado pelo chamador é conferido com a soma recalculada no banco.
A baixa dos créditos usa UPDATE condicional (status = DISPONIVEL): se outro
repasse já pagou algum deles, nada é gravado e a operação termina em conflito.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from honorarios.config import TOLERANCIA_REPASSE
from honorarios.database import unit_of_work
from honorarios.dominio import OrigemTitulo, StatusCredito, StatusTitulo, TipoTitulo
from honorarios.errors import ConflictError, NotFoundError, RegraNegocioError
from honorarios.models.credito import CreditoStaff
from honorarios.models.staff import Staff
from honorarios.models.titulo import TituloFinanceiro
from honorarios.services.notificacoes import REPASSE_LIQUIDADO, registrar_evento_outbox
from honorarios.services.valores import valor_monetario

logger = logging.getLogger(__name__)


def liquidar_repasse(
    db: Session,
    staff_id: int,
    credito_ids: List[int],
    valor_total,
    usuario_id: Optional[int] = None,
) -> dict:
    """Liquida os créditos e devolve os dados do comprovante de repasse."""
    ids = list(dict.fromkeys(credito_ids or []))
    if not ids:
        raise RegraNegocioError("Selecione ao menos um crédito para o repasse.")
    # Sem exigir centavos exatos: a soma recalculada é conferida com tolerância
    valor_informado = valor_monetario(valor_total, "valor do repasse", centavos_exatos=False)

    staff = db.query(Staff).filter(Staff.id == staff_id).first()
    if not staff:
        raise NotFoundError("Profissional não encontrado.")

    agora = datetime.utcnow()
    with unit_of_work(db):
        creditos = (
            db.query(CreditoStaff)
            .filter(CreditoStaff.id.in_(ids), CreditoStaff.staff_id == staff.id)
            .order_by(CreditoStaff.id)
            .all()
        )
        if len(creditos) != len(ids):
            raise NotFoundError("Um ou mais créditos não pertencem a este profissional.")

        indisponiveis = [c.id for c in creditos if c.status != StatusCredito.DISPONIVEL.value]
        if indisponiveis:
            raise ConflictError(f"Créditos não disponíveis para repasse: {indisponiveis}")

        soma = sum((c.valor for c in creditos), Decimal("0"))
        if abs(soma - valor_informado) > TOLERANCIA_REPASSE:
            raise RegraNegocioError(
                f"Total informado ({valor_informado}) difere da soma dos créditos ({soma})."
            )

        titulo = TituloFinanceiro(
            staff_id=staff.id,
            descricao=f"Repasse de honorários - {staff.nome}",
            tipo=TipoTitulo.DESPESA.value,
            origem=OrigemTitulo.HONORARIOS_PAGOS.value,
            valor=soma,
            data_vencimento=agora.date(),
            status=StatusTitulo.PAGO.value,
            data_pagamento=agora,
        )
        db.add(titulo)
        db.flush()

        baixados = (
            db.query(CreditoStaff)
            .filter(
                CreditoStaff.id.in_(ids),
                CreditoStaff.staff_id == staff.id,
                CreditoStaff.status == StatusCredito.DISPONIVEL.value,
            )
            .update(
                {
                    CreditoStaff.status: StatusCredito.PAGO.value,
                    CreditoStaff.data_pagamento: agora,
                    CreditoStaff.pago_por_id: usuario_id,
                    CreditoStaff.titulo_repasse_id: titulo.id,
                },
                synchronize_session=False,
            )
        )
        if baixados != len(ids):
            raise ConflictError("Os créditos foram alterados por outra operação. Repasse cancelado.")

        registrar_evento_outbox(db, REPASSE_LIQUIDADO, {
            "staff_id": staff.id,
            "titulo_id": titulo.id,
            "valor_total": str(soma),
            "quantidade_creditos": len(ids),
        })

    logger.info("Repasse de %s para staff %s: %d crédito(s), título %s", soma, staff.id, len(ids), titulo.id)
    return montar_comprovante(staff, creditos, soma, agora, titulo.id)


def montar_comprovante(staff: Staff, creditos, total, data_pagamento, titulo_id=None) -> dict:
    return {
        "titulo_id": titulo_id,
        "staff_id": staff.id,
        "nome": staff.nome,
        "numero_oab": staff.numero_oab,
        "banco": staff.banco,
        "agencia": staff.agencia,
        "conta": staff.conta,
        "chave_pix": staff.chave_pix,
        "creditos": [
            {"id": c.id, "tipo": c.tipo, "descricao": c.descricao, "valor": c.valor}
            for c in creditos
        ],
        "valor_total": total,
        "data_pagamento": data_pagamento,
    }


def comprovante_de_titulo(db: Session, titulo_id: int) -> dict:
    """Reemite o comprovante a partir de um título HONORARIOS_PAGOS do histórico."""
    titulo = (
        db.query(TituloFinanceiro)
        .filter(
            TituloFinanceiro.id == titulo_id,
            TituloFinanceiro.origem == OrigemTitulo.HONORARIOS_PAGOS.value,
        )
        .first()
    )
    if not titulo or not titulo.staff_id:
        raise NotFoundError("Repasse não encontrado.")
    staff = db.query(Staff).filter(Staff.id == titulo.staff_id).first()
    if not staff:
        raise NotFoundError("Profissional não encontrado.")
    creditos = (
        db.query(CreditoStaff)
        .filter(CreditoStaff.titulo_repasse_id == titulo.id)
        .order_by(CreditoStaff.id)
        .all()
    )
    return montar_comprovante(staff, creditos, titulo.valor, titulo.data_pagamento, titulo.id)


def historico_repasses(db: Session, limite: int = 50) -> List[TituloFinanceiro]:
    return (
        db.query(TituloFinanceiro)
        .filter(TituloFinanceiro.origem == OrigemTitulo.HONORARIOS_PAGOS.value)
        .order_by(TituloFinanceiro.data_pagamento.desc())
        .limit(limite)
        .all()
    )


def resumo_repasses(db: Session, hoje: Optional[datetime] = None) -> dict:
    """Totais para o painel de repasses. Leitura sem transação (pode estar defasada)."""
    hoje = hoje or datetime.utcnow()
    inicio_mes = hoje.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    def _total_creditos(status):
        return db.query(func.coalesce(func.sum(CreditoStaff.valor), 0)).filter(
            CreditoStaff.status == status.value
        ).scalar()

    pago_mes = db.query(func.coalesce(func.sum(TituloFinanceiro.valor), 0)).filter(
        TituloFinanceiro.origem == OrigemTitulo.HONORARIOS_PAGOS.value,
        TituloFinanceiro.data_pagamento >= inicio_mes,
    ).scalar()

    return {
        "total_disponivel": Decimal(str(_total_creditos(StatusCredito.DISPONIVEL))),
        "total_retido": Decimal(str(_total_creditos(StatusCredito.RETIDO))),
        "total_pago_mes": Decimal(str(pago_mes)),
        "quantidade_staff": db.query(func.count(Staff.id)).scalar() or 0,
    }
