# -*- coding: utf-8 -*-
"""
Folha mensal: credita o valor fixo de todos os profissionais FIXO_MENSAL.

Cada profissional é gravado na própria transação; uma falha não interrompe os
demais e fica registrada no resultado. Quem já tem crédito SALARIO no mesmo
mês de referência é ignorado (evita crédito em dobro se a folha rodar duas vezes).
A restrição única (staff_id, tipo, mes_referencia) cobre duas execuções simultâneas:
o perdedor recebe IntegrityError e o profissional entra em `ignorados`.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from honorarios.database import unit_of_work
from honorarios.dominio import MESES_PT, StatusCredito, TipoCredito, TipoRemuneracao
from honorarios.errors import HonorariosError, PersistenceError
from honorarios.models.credito import CreditoStaff
from honorarios.models.staff import Staff

logger = logging.getLogger(__name__)


@dataclass
class ResultadoFolha:
    mes_referencia: str
    creditados: List[int] = field(default_factory=list)
    ignorados: List[int] = field(default_factory=list)
    falhas: List[dict] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.creditados)


def rotulo_mes(referencia: date) -> str:
    return f"{MESES_PT[referencia.month - 1]}/{referencia.year}"


def _ja_creditado(db: Session, staff_id: int, mes_referencia: str) -> bool:
    return (
        db.query(CreditoStaff.id)
        .filter(
            CreditoStaff.staff_id == staff_id,
            CreditoStaff.tipo == TipoCredito.SALARIO.value,
            CreditoStaff.mes_referencia == mes_referencia,
        )
        .first()
    ) is not None


def executar_folha_mensal(db: Session, referencia: Optional[date] = None) -> ResultadoFolha:
    referencia = referencia or date.today()
    mes_referencia = referencia.strftime("%Y-%m")
    resultado = ResultadoFolha(mes_referencia=mes_referencia)

    fixos = [
        (staff.id, staff.valor_fixo_mensal)
        for staff in db.query(Staff)
        .filter(Staff.tipo_remuneracao == TipoRemuneracao.FIXO_MENSAL.value)
        .order_by(Staff.id)
        .all()
    ]
    logger.info("Folha %s: %d profissional(is) com remuneração fixa", mes_referencia, len(fixos))

    for staff_id, valor in fixos:
        if not valor or valor <= 0:
            logger.warning("Staff %s sem valor fixo mensal. Pulando.", staff_id)
            resultado.falhas.append({"staff_id": staff_id, "erro": "Valor fixo mensal não definido."})
            continue

        try:
            if _ja_creditado(db, staff_id, mes_referencia):
                resultado.ignorados.append(staff_id)
                continue
            with unit_of_work(db):
                db.add(CreditoStaff(
                    staff_id=staff_id,
                    tipo=TipoCredito.SALARIO.value,
                    descricao=f"Pro-labore / Salário - {rotulo_mes(referencia)}",
                    valor=valor,
                    status=StatusCredito.DISPONIVEL.value,
                    mes_referencia=mes_referencia,
                ))
        except PersistenceError as e:
            if isinstance(e.__cause__, IntegrityError):
                # Outra execução da folha gravou o mesmo mês primeiro
                logger.info("Folha %s do staff %s já gravada por outra execução", mes_referencia, staff_id)
                resultado.ignorados.append(staff_id)
            else:
                logger.error("Falha ao creditar folha do staff %s: %s", staff_id, e.message)
                resultado.falhas.append({"staff_id": staff_id, "erro": e.message})
            continue
        except HonorariosError as e:
            logger.error("Falha ao creditar folha do staff %s: %s", staff_id, e.message)
            resultado.falhas.append({"staff_id": staff_id, "erro": e.message})
            continue
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Falha ao consultar folha do staff %s: %s", staff_id, e, exc_info=True)
            resultado.falhas.append({"staff_id": staff_id, "erro": "Falha ao consultar o banco de dados."})
            continue

        resultado.creditados.append(staff_id)
        logger.info("-> Folha %s creditada para staff %s: R$ %s", mes_referencia, staff_id, valor)

    logger.info(
        "Folha %s concluída: %d creditado(s), %d ignorado(s), %d falha(s)",
        mes_referencia, resultado.count, len(resultado.ignorados), len(resultado.falhas),
    )
    return resultado
