# tests/integration/test_api_cenarios.py
from fastapi.testclient import TestClient


def _criar(client: TestClient, nome: str, itens: list[dict] | None = None) -> dict:
    body = {"nome": nome, "data_base": "2025-01-01", "itens": itens or []}
    response = client.post("/api/cenarios", json=body)
    assert response.status_code == 201
    return response.json()


def test_criar_cenario_com_itens_retorna_resumo(client: TestClient) -> None:
    data = _criar(client, "Expansao 2025", [{"cargo_id": "c-analista", "quantidade": 3}])
    assert data["cenario"]["nome"] == "Expansao 2025"
    assert data["cenario"]["data_base"] == "2025-01-01"
    assert data["resumo"]["total_mensal"] == "21300.00"
    assert data["resumo"]["total_anual"] == "294800.00"
    linha = data["resumo"]["linhas"][0]
    assert linha["quantidade"] == 3
    assert linha["mensal_unitario"] == "7100.00"


def test_criar_cenario_sem_itens_soma_zero(client: TestClient) -> None:
    data = _criar(client, "Vazio")
    assert data["resumo"]["total_mensal"] == "0.00"
    assert data["resumo"]["total_anual"] == "0.00"
    assert data["resumo"]["linhas"] == []


def test_criar_cenario_soma_itens_repetidos(client: TestClient) -> None:
    data = _criar(
        client,
        "Repetidos",
        [
            {"cargo_id": "c-estagio", "quantidade": 4},
            {"cargo_id": "c-estagio", "quantidade": 6},
        ],
    )
    assert len(data["resumo"]["linhas"]) == 1
    assert data["resumo"]["linhas"][0]["quantidade"] == 10
    assert data["resumo"]["total_anual"] == "117120.00"


def test_criar_cenario_nome_em_branco_retorna_422(client: TestClient) -> None:
    response = client.post("/api/cenarios", json={"nome": "   "})
    assert response.status_code == 422


def test_criar_cenario_quantidade_negativa_retorna_422(client: TestClient) -> None:
    body = {"nome": "Negativo", "itens": [{"cargo_id": "c-analista", "quantidade": -1}]}
    response = client.post("/api/cenarios", json=body)
    assert response.status_code == 422


def test_listar_cenarios_mais_recentes_primeiro(client: TestClient) -> None:
    primeiro = _criar(client, "Primeiro")
    segundo = _criar(client, "Segundo")
    ids = [c["id"] for c in client.get("/api/cenarios").json()]
    assert ids.index(segundo["cenario"]["id"]) < ids.index(primeiro["cenario"]["id"])


def test_obter_cenario_inexistente_retorna_404(client: TestClient) -> None:
    response = client.get("/api/cenarios/nao-existe")
    assert response.status_code == 404


def test_cargo_inativo_e_orfao_sao_ignorados(client: TestClient) -> None:
    data = _criar(
        client,
        "Com lixo",
        [
            {"cargo_id": "c-estagio", "quantidade": 1},
            {"cargo_id": "c-inativo", "quantidade": 5},
            {"cargo_id": "cargo-removido", "quantidade": 2},
        ],
    )
    assert [li["cargo_id"] for li in data["resumo"]["linhas"]] == ["c-estagio"]
    assert data["resumo"]["total_anual"] == "11712.00"


def test_salvar_itens_substitui_conjunto(client: TestClient) -> None:
    cenario_id = _criar(client, "Troca", [{"cargo_id": "c-analista", "quantidade": 3}])["cenario"]["id"]

    response = client.put(
        f"/api/cenarios/{cenario_id}/itens",
        json={"itens": [{"cargo_id": "c-estagio", "quantidade": 10}]},
    )
    assert response.status_code == 200
    assert response.json()["total_anual"] == "117120.00"

    linhas = client.get(f"/api/cenarios/{cenario_id}").json()["resumo"]["linhas"]
    assert [(li["cargo_id"], li["quantidade"]) for li in linhas] == [("c-estagio", 10)]


def test_salvar_itens_vazio_limpa_cenario(client: TestClient) -> None:
    cenario_id = _criar(client, "Limpar", [{"cargo_id": "c-analista", "quantidade": 1}])["cenario"]["id"]
    response = client.put(f"/api/cenarios/{cenario_id}/itens", json={"itens": []})
    assert response.status_code == 200
    assert response.json()["total_mensal"] == "0.00"


def test_salvar_itens_cenario_inexistente_retorna_404(client: TestClient) -> None:
    response = client.put("/api/cenarios/nao-existe/itens", json={"itens": []})
    assert response.status_code == 404


def test_adicionar_itens_soma_aos_existentes(client: TestClient) -> None:
    cenario_id = _criar(client, "Soma", [{"cargo_id": "c-estagio", "quantidade": 4}])["cenario"]["id"]

    response = client.post(
        f"/api/cenarios/{cenario_id}/itens",
        json={"itens": [{"cargo_id": "c-estagio", "quantidade": 6}]},
    )
    assert response.status_code == 200
    assert response.json()["linhas"][0]["quantidade"] == 10
    assert response.json()["total_anual"] == "117120.00"


def test_simular_impacto_nao_salva(client: TestClient) -> None:
    cenario_id = _criar(client, "Impacto", [{"cargo_id": "c-estagio", "quantidade": 10}])["cenario"]["id"]

    response = client.post(
        f"/api/cenarios/{cenario_id}/impacto",
        json={"itens": [{"cargo_id": "c-analista", "quantidade": 3}]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["cenario_a"]["total_anual"] == "117120.00"
    assert data["cenario_b"]["total_anual"] == "411920.00"
    assert data["delta_anual"] == "294800.00"
    assert data["delta_mensal"] == "21300.00"

    resumo = client.get(f"/api/cenarios/{cenario_id}").json()["resumo"]
    assert resumo["total_anual"] == "117120.00"


def test_simular_impacto_cenario_inexistente_retorna_404(client: TestClient) -> None:
    response = client.post("/api/cenarios/nao-existe/impacto", json={"itens": []})
    assert response.status_code == 404


def test_remover_cenario(client: TestClient) -> None:
    cenario_id = _criar(client, "Remover", [{"cargo_id": "c-analista", "quantidade": 1}])["cenario"]["id"]

    assert client.delete(f"/api/cenarios/{cenario_id}").status_code == 204
    assert client.get(f"/api/cenarios/{cenario_id}").status_code == 404
    assert client.delete(f"/api/cenarios/{cenario_id}").status_code == 404
