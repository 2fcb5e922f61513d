# -*- coding: utf-8 -*-
"""
Fluxo HTTP completo: evento -> baixa do título -> repasse -> notificação, com checagem de papéis.
"""

from honorarios.auth import get_password_hash
from honorarios.models.usuario import Usuario


def _evento(processo_id, **kwargs):
    dados = {
        "processo_id": processo_id,
        "tipo": "ACORDO",
        "data_evento": "2024-05-10",
        "descricao": "Acordo trabalhista",
        "valor_total": 10000.0,
        "parcelas": 2,
        "primeiro_vencimento": "2024-06-10",
    }
    dados.update(kwargs)
    return dados


def test_sem_token(client, cenario):
    response = client.get("/api/v1/financeiro/titulos")
    assert response.status_code == 401


def test_conta_pendente_e_bloqueada(client, headers, cenario):
    response = client.get("/api/v1/financeiro/titulos", headers=headers("pendente"))
    assert response.status_code == 403


def test_login_e_perfil(client, db, cenario):
    usuario = db.query(Usuario).filter(Usuario.username == "gerente").first()
    usuario.hashed_password = get_password_hash("segredo123")
    db.commit()

    response = client.post(
        "/api/v1/auth/token",
        data={"username": "gerente@escritorio.com.br", "password": "segredo123"},
    )
    assert response.status_code == 200
    token = response.json()["access_token"]

    response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["role"] == "gerente"

    response = client.post(
        "/api/v1/auth/token",
        data={"username": "gerente@escritorio.com.br", "password": "errada"},
    )
    assert response.status_code == 401


def test_fluxo_completo_do_acordo_ao_repasse(client, headers, cenario):
    advogado_id = cenario.advogado.id

    response = client.post("/api/v1/financeiro/eventos", json=_evento(cenario.processo.id), headers=headers("advogado"))
    assert response.status_code == 201
    registrado = response.json()
    assert len(registrado["titulos_ids"]) == 2
    credito_id = registrado["credito_id"]

    response = client.get(f"/api/v1/repasses/staff/{advogado_id}/saldo", headers=headers("advogado"))
    assert response.json()["retido"] == 900.0

    # Advogado não baixa títulos
    titulo_id = registrado["titulos_ids"][0]
    response = client.patch(
        f"/api/v1/financeiro/titulos/{titulo_id}/status", json={"status": "PAGO"}, headers=headers("advogado"),
    )
    assert response.status_code == 403

    response = client.patch(
        f"/api/v1/financeiro/titulos/{titulo_id}/status", json={"status": "PAGO"}, headers=headers("gerente"),
    )
    assert response.status_code == 200
    assert response.json()["status"] == "PAGO"

    response = client.get(
        f"/api/v1/repasses/staff/{advogado_id}/creditos", params={"status": "DISPONIVEL"}, headers=headers("admin"),
    )
    assert [c["id"] for c in response.json()] == [credito_id]

    # Gerente não liquida repasses
    repasse = {"credito_ids": [credito_id], "valor_total": 900.0}
    response = client.post(f"/api/v1/repasses/staff/{advogado_id}/liquidar", json=repasse, headers=headers("gerente"))
    assert response.status_code == 403

    response = client.post(f"/api/v1/repasses/staff/{advogado_id}/liquidar", json=repasse, headers=headers("admin"))
    assert response.status_code == 200
    comprovante = response.json()["comprovante"]
    assert comprovante["valor_total"] == 900.0
    assert comprovante["creditos"][0]["id"] == credito_id

    response = client.post(f"/api/v1/repasses/staff/{advogado_id}/liquidar", json=repasse, headers=headers("admin"))
    assert response.status_code == 409

    response = client.get(f"/api/v1/repasses/historico/{comprovante['titulo_id']}/comprovante", headers=headers("admin"))
    assert response.status_code == 200
    assert response.json()["nome"] == "Dr. João Souza"

    response = client.get("/api/v1/notificacoes", headers=headers("advogado"))
    [notificacao] = response.json()
    assert notificacao["titulo"] == "Repasse realizado"

    response = client.post(f"/api/v1/notificacoes/{notificacao['id']}/lida", headers=headers("advogado"))
    assert response.json()["lida"] is True


def test_evento_de_processo_inexistente(client, headers, cenario):
    response = client.post("/api/v1/financeiro/eventos", json=_evento(9999), headers=headers("advogado"))
    assert response.status_code == 404
    assert response.json()["detail"] == "Processo associado não encontrado."


def test_evento_com_valor_invalido(client, headers, cenario):
    response = client.post(
        "/api/v1/financeiro/eventos", json=_evento(cenario.processo.id, valor_total=0), headers=headers("advogado"),
    )
    assert response.status_code == 422


def test_demonstrativo(client, headers, cenario):
    response = client.post("/api/v1/financeiro/eventos", json=_evento(cenario.processo.id), headers=headers("advogado"))
    evento_id = response.json()["evento_id"]

    response = client.get(f"/api/v1/financeiro/eventos/{evento_id}/demonstrativo", headers=headers("advogado"))
    assert response.status_code == 200
    demonstrativo = response.json()
    assert demonstrativo["honorarios_escritorio"] == 3000.0
    assert demonstrativo["valor_cliente"] == 7000.0
    assert len(demonstrativo["parcelas"]) == 2


def test_credito_manual_com_valor_zero(client, headers, cenario):
    response = client.post(
        f"/api/v1/repasses/staff/{cenario.advogado.id}/creditos",
        json={"descricao": "Reembolso", "valor": 0},
        headers=headers("admin"),
    )
    assert response.status_code == 422

    response = client.get(f"/api/v1/repasses/staff/{cenario.advogado.id}/creditos", headers=headers("admin"))
    assert response.json() == []


def test_folha_pelo_endpoint(client, headers, cenario):
    response = client.post("/api/v1/repasses/folha", json={"mes": 3, "ano": 2024}, headers=headers("admin"))
    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert response.json()["mes_referencia"] == "2024-03"

    response = client.post("/api/v1/repasses/folha", json={"mes": 3, "ano": 2024}, headers=headers("admin"))
    assert response.json()["count"] == 0
    assert response.json()["ignorados"] == [cenario.secretaria.id]

    response = client.post("/api/v1/repasses/folha", json={"mes": 3, "ano": 2024}, headers=headers("gerente"))
    assert response.status_code == 403


def test_titulo_manual_exige_financeiro(client, headers, cenario):
    titulo = {
        "descricao": "Aluguel", "tipo": "DESPESA", "origem": "ALUGUEL_CONTAS",
        "valor": 2500.0, "data_vencimento": "2024-07-05",
    }
    response = client.post("/api/v1/financeiro/titulos", json=titulo, headers=headers("advogado"))
    assert response.status_code == 403

    response = client.post("/api/v1/financeiro/titulos", json=titulo, headers=headers("gerente"))
    assert response.status_code == 201
    assert response.json()["evento_financeiro_id"] is None


def test_evento_acima_do_maximo(client, headers, cenario):
    response = client.post(
        "/api/v1/financeiro/eventos", json=_evento(cenario.processo.id, valor_total=1e30), headers=headers("advogado"),
    )
    assert response.status_code == 422

    response = client.get("/api/v1/financeiro/titulos", headers=headers("gerente"))
    assert response.json() == []


def test_folha_com_periodo_incompleto(client, headers, cenario):
    response = client.post("/api/v1/repasses/folha", json={"mes": 3}, headers=headers("admin"))
    assert response.status_code == 422

    response = client.post("/api/v1/repasses/folha", json={"ano": 2024}, headers=headers("admin"))
    assert response.status_code == 422


def test_liberacao_antecipada_so_pelo_proprio_profissional_ou_admin(client, headers, cenario):
    advogado_id = cenario.advogado.id
    response = client.post("/api/v1/financeiro/eventos", json=_evento(cenario.processo.id), headers=headers("advogado"))
    credito_id = response.json()["credito_id"]
    url = f"/api/v1/repasses/staff/{advogado_id}/creditos/{credito_id}/solicitar-liberacao"

    response = client.post(url, json={"motivo": "Cliente pagou em espécie"}, headers=headers("gerente"))
    assert response.status_code == 403

    response = client.post(url, json={"motivo": "Cliente pagou em espécie"}, headers=headers("advogado"))
    assert response.status_code == 200
    assert response.json()["liberacao_solicitada"] is True

    response = client.post(url, json={"motivo": "Confirmado pela recepção"}, headers=headers("admin"))
    assert response.status_code == 200
    assert response.json()["motivo_liberacao"] == "Confirmado pela recepção"
