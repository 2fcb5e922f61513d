# -*- coding: utf-8 -*-
"""
Repasse: liquidação atômica, proteção contra pagamento em dobro e notificação pós-commit.
"""

from decimal import Decimal

import pytest
from sqlalchemy import event, update

from honorarios.dominio import OrigemTitulo, StatusCredito
from honorarios.errors import ConflictError, NotFoundError, RegraNegocioError
from honorarios.models.credito import CreditoStaff
from honorarios.models.notificacao import EventoOutbox, Notificacao
from honorarios.models.staff import Staff
from honorarios.models.titulo import TituloFinanceiro
from honorarios.services import notificacoes, repasse
from honorarios.services.creditos import criar_credito_manual


@pytest.fixture
def creditos(db, cenario):
    primeiro = criar_credito_manual(db, cenario.advogado.id, "Audiência 12/03", Decimal("1000.00"), tipo="PRODUCAO")
    segundo = criar_credito_manual(db, cenario.advogado.id, "Reembolso de táxi", Decimal("500.00"))
    return [primeiro, segundo]


def _repasses(db):
    return db.query(TituloFinanceiro).filter(TituloFinanceiro.origem == OrigemTitulo.HONORARIOS_PAGOS.value).all()


def test_liquida_creditos_e_cria_uma_despesa(db, cenario, creditos):
    comprovante = repasse.liquidar_repasse(
        db, cenario.advogado.id, [c.id for c in creditos], Decimal("1500.00"), usuario_id=cenario.admin.id,
    )

    db.expire_all()
    for credito in creditos:
        assert credito.status == StatusCredito.PAGO.value
        assert credito.data_pagamento is not None
        assert credito.pago_por_id == cenario.admin.id
        assert credito.titulo_repasse_id == comprovante["titulo_id"]

    [titulo] = _repasses(db)
    assert titulo.tipo == "DESPESA"
    assert titulo.status == "PAGO"
    assert titulo.valor == Decimal("1500.00")
    assert titulo.staff_id == cenario.advogado.id

    assert comprovante["valor_total"] == Decimal("1500.00")
    assert comprovante["nome"] == "Dr. João Souza"
    assert comprovante["chave_pix"] == "joao@escritorio.com.br"
    assert [item["id"] for item in comprovante["creditos"]] == [c.id for c in creditos]


def test_segundo_repasse_dos_mesmos_creditos_e_conflito(db, cenario, creditos):
    ids = [c.id for c in creditos]
    repasse.liquidar_repasse(db, cenario.advogado.id, ids, Decimal("1500.00"))

    with pytest.raises(ConflictError):
        repasse.liquidar_repasse(db, cenario.advogado.id, ids, Decimal("1500.00"))
    assert len(_repasses(db)) == 1


def test_total_divergente_nao_grava_nada(db, cenario, creditos):
    with pytest.raises(RegraNegocioError):
        repasse.liquidar_repasse(db, cenario.advogado.id, [c.id for c in creditos], Decimal("1400.00"))

    db.expire_all()
    assert all(c.status == StatusCredito.DISPONIVEL.value for c in creditos)
    assert _repasses(db) == []
    assert db.query(EventoOutbox).count() == 0


def test_tolerancia_de_meio_centavo(db, cenario, creditos):
    comprovante = repasse.liquidar_repasse(db, cenario.advogado.id, [c.id for c in creditos], 1500.004)
    # O título usa a soma recalculada, não o valor informado
    assert comprovante["valor_total"] == Decimal("1500.00")


def test_credito_retido_nao_pode_ser_repassado(db, cenario):
    retido = criar_credito_manual(db, cenario.advogado.id, "Aguardando cliente", Decimal("300.00"), status="RETIDO")
    with pytest.raises(ConflictError):
        repasse.liquidar_repasse(db, cenario.advogado.id, [retido.id], Decimal("300.00"))
    assert _repasses(db) == []


def test_credito_de_outro_profissional(db, cenario, creditos):
    with pytest.raises(NotFoundError):
        repasse.liquidar_repasse(db, cenario.secretaria.id, [creditos[0].id], Decimal("1000.00"))


def test_selecao_vazia(db, cenario):
    with pytest.raises(RegraNegocioError):
        repasse.liquidar_repasse(db, cenario.advogado.id, [], Decimal("10.00"))


def test_alteracao_concorrente_cancela_o_repasse_inteiro(db, cenario, creditos):
    """Outro repasse paga um dos créditos entre a leitura e a baixa: nada é gravado."""
    tabela = CreditoStaff.__table__

    def pagar_por_fora(session, flush_context):
        session.connection().execute(
            update(tabela).where(tabela.c.id == creditos[0].id).values(status=StatusCredito.PAGO.value)
        )

    event.listen(db, "after_flush", pagar_por_fora, once=True)

    with pytest.raises(ConflictError):
        repasse.liquidar_repasse(db, cenario.advogado.id, [c.id for c in creditos], Decimal("1500.00"))

    db.expire_all()
    assert [c.status for c in creditos] == [StatusCredito.DISPONIVEL.value] * 2
    assert all(c.titulo_repasse_id is None for c in creditos)
    assert _repasses(db) == []


def test_repasse_grava_evento_e_notifica_o_profissional(db, cenario, creditos):
    repasse.liquidar_repasse(db, cenario.advogado.id, [c.id for c in creditos], Decimal("1500.00"))

    [evento] = db.query(EventoOutbox).all()
    assert evento.tipo == notificacoes.REPASSE_LIQUIDADO
    assert evento.entregue_em is None

    assert notificacoes.entregar_pendentes(db) == 1
    [notificacao] = db.query(Notificacao).all()
    assert notificacao.usuario_id == cenario.advogado_login.id
    assert "R$ 1.500,00" in notificacao.descricao
    assert evento.entregue_em is not None

    # Já entregue: não duplica
    assert notificacoes.entregar_pendentes(db) == 0


def test_falha_de_notificacao_nao_afeta_o_repasse(db, cenario, creditos):
    repasse.liquidar_repasse(db, cenario.advogado.id, [c.id for c in creditos], Decimal("1500.00"))
    evento_quebrado = notificacoes.registrar_evento_outbox(db, notificacoes.REPASSE_LIQUIDADO, {"staff_id": 9999})
    db.commit()

    notificacoes.entregar_sem_falhar(db)

    db.expire_all()
    assert evento_quebrado.entregue_em is None
    assert evento_quebrado.tentativas == 1
    assert "9999" in evento_quebrado.ultimo_erro
    assert len(_repasses(db)) == 1
    assert all(c.status == StatusCredito.PAGO.value for c in creditos)
    assert db.query(Notificacao).count() == 1


def test_comprovante_reemitido_pelo_historico(db, cenario, creditos):
    original = repasse.liquidar_repasse(db, cenario.advogado.id, [c.id for c in creditos], Decimal("1500.00"))

    [titulo] = repasse.historico_repasses(db)
    reemitido = repasse.comprovante_de_titulo(db, titulo.id)

    assert reemitido["titulo_id"] == original["titulo_id"]
    assert reemitido["valor_total"] == Decimal("1500.00")
    assert len(reemitido["creditos"]) == 2


def test_resumo_do_painel(db, cenario, creditos):
    criar_credito_manual(db, cenario.advogado.id, "Retido", Decimal("250.00"), status="RETIDO")
    repasse.liquidar_repasse(db, cenario.advogado.id, [creditos[0].id], Decimal("1000.00"))

    resumo = repasse.resumo_repasses(db)
    assert resumo["total_disponivel"] == Decimal("500.00")
    assert resumo["total_retido"] == Decimal("250.00")
    assert resumo["total_pago_mes"] == Decimal("1000.00")
    assert resumo["quantidade_staff"] == db.query(Staff).count()
