# -*- coding: utf-8 -*-
"""
Cadastro básico de clientes, processos e profissionais consumido pelo módulo financeiro.
"""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from honorarios.database import unit_of_work
from honorarios.dominio import TipoRemuneracao
from honorarios.errors import NotFoundError, RegraNegocioError
from honorarios.models.cliente import Cliente
from honorarios.models.processo import Processo
from honorarios.models.staff import Staff

logger = logging.getLogger(__name__)

# Campo obrigatório para cada regra de remuneração
CAMPO_OBRIGATORIO = {
    TipoRemuneracao.SUCUMBENCIA: "percentual_advogado",
    TipoRemuneracao.QUOTA_LITIS: "percentual_advogado",
    TipoRemuneracao.FIXO_MENSAL: "valor_fixo_mensal",
    TipoRemuneracao.AUDIENCISTA: "valor_por_audiencia",
    TipoRemuneracao.PRODUCAO: None,
}


def criar_cliente(db: Session, dados: dict) -> Cliente:
    with unit_of_work(db):
        cliente = Cliente(**dados)
        db.add(cliente)
    return cliente


def criar_processo(db: Session, dados: dict) -> Processo:
    if not db.query(Cliente).filter(Cliente.id == dados["cliente_id"]).first():
        raise NotFoundError("Cliente não encontrado.")
    advogado_id = dados.get("advogado_responsavel_id")
    if advogado_id and not db.query(Staff).filter(Staff.id == advogado_id).first():
        raise NotFoundError("Advogado responsável não encontrado.")
    with unit_of_work(db):
        processo = Processo(**dados)
        db.add(processo)
    return processo


def criar_staff(db: Session, dados: dict) -> Staff:
    tipo = dados.get("tipo_remuneracao")
    if tipo:
        try:
            tipo = TipoRemuneracao(tipo)
        except ValueError:
            raise RegraNegocioError(f"Tipo de remuneração desconhecido: {tipo}")
        campo = CAMPO_OBRIGATORIO[tipo]
        if campo and not dados.get(campo):
            raise RegraNegocioError(f"A remuneração {tipo.value} exige o campo '{campo}'.")
        dados["tipo_remuneracao"] = tipo.value

    for chave, valor in dados.items():
        if isinstance(valor, float):
            dados[chave] = Decimal(str(valor))

    with unit_of_work(db):
        staff = Staff(**dados)
        db.add(staff)
    logger.info("Staff %s cadastrado (%s)", staff.id, staff.tipo_remuneracao or "sem remuneração")
    return staff


def obter_staff(db: Session, staff_id: int) -> Staff:
    staff = db.query(Staff).filter(Staff.id == staff_id).first()
    if not staff:
        raise NotFoundError("Profissional não encontrado.")
    return staff
