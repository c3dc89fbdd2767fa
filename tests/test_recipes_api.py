"""
API tests for the /receitas endpoints.
"""

import uuid
from urllib.parse import quote

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from receitas.db_handlers import RecipeDBHandler, check_local_db


def test_list_starts_empty(client: TestClient):
    res = client.get("/receitas")

    assert res.status_code == 200
    assert res.json() == []


def test_create_requires_token(client: TestClient):
    res = client.post(
        "/receitas",
        json={"titulo": "Bolo", "ingredientes": "Farinha", "preparo": "Asse"},
    )

    assert res.status_code == 401


def test_create_with_unknown_token(client: TestClient):
    res = client.post(
        "/receitas",
        json={"titulo": "Bolo", "ingredientes": "Farinha", "preparo": "Asse"},
        headers={"Authorization": f"Bearer {uuid.uuid4()}"},
    )

    assert res.status_code == 401


def test_create_then_get_returns_same_values(client, sign_in, create_recipe):
    headers = sign_in()
    recipe_id = create_recipe(headers)

    res = client.get(f"/receitas/{recipe_id}")

    assert res.status_code == 200
    body = res.json()
    assert body["_id"] == recipe_id
    assert body["titulo"] == "Pão com Ovo"
    assert body["ingredientes"] == "Ovo e pão"
    assert body["preparo"] == "Frite o ovo e coloque no pão"
    assert body["idUsuario"] is not None


def test_create_accepts_token_without_bearer_prefix(client, sign_in, create_recipe):
    headers = sign_in()
    raw_token = headers["Authorization"].removeprefix("Bearer ")

    recipe_id = create_recipe({"Authorization": raw_token})

    assert client.get(f"/receitas/{recipe_id}").status_code == 200


def test_create_duplicate_title_conflicts(client, sign_in, create_recipe):
    headers = sign_in()
    create_recipe(headers, titulo="Pão com Whey")

    res = client.post(
        "/receitas",
        json={"titulo": "Pão com Whey", "ingredientes": "outro", "preparo": "outro"},
        headers=headers,
    )

    assert res.status_code == 409


def test_create_reports_every_empty_field(client, sign_in):
    headers = sign_in()

    res = client.post(
        "/receitas", json={"titulo": "", "preparo": "Asse"}, headers=headers
    )

    assert res.status_code == 422
    messages = res.json()
    assert len(messages) == 2
    assert any('"titulo"' in m for m in messages)
    assert any('"ingredientes"' in m for m in messages)


def test_create_validates_fields_before_token(client: TestClient):
    res = client.post("/receitas", json={"titulo": "Bolo"})

    assert res.status_code == 422


def test_get_with_malformed_id_is_not_found(client: TestClient):
    res = client.get("/receitas/not-a-valid-id")

    assert res.status_code == 404


def test_get_unknown_id_is_not_found(client: TestClient):
    res = client.get(f"/receitas/{uuid.uuid4()}")

    assert res.status_code == 404


def test_list_filters_by_ingredient(client, sign_in, create_recipe):
    headers = sign_in()
    create_recipe(headers, titulo="Omelete", ingredientes="OVO, queijo")
    create_recipe(headers, titulo="Torrada", ingredientes="pão, manteiga")

    res = client.get("/receitas", params={"ingrediente": "ovo"})

    assert res.status_code == 200
    assert [r["titulo"] for r in res.json()] == ["Omelete"]
    assert len(client.get("/receitas").json()) == 2


def test_owner_can_update_partially(client, sign_in, create_recipe):
    headers = sign_in()
    recipe_id = create_recipe(headers)

    res = client.put(
        f"/receitas/{recipe_id}", json={"preparo": "Novo preparo"}, headers=headers
    )

    assert res.status_code == 200
    body = client.get(f"/receitas/{recipe_id}").json()
    assert body["preparo"] == "Novo preparo"
    assert body["titulo"] == "Pão com Ovo"
    assert body["ingredientes"] == "Ovo e pão"


def test_non_owner_update_is_unauthorized_and_changes_nothing(
    client, sign_in, create_recipe
):
    owner = sign_in()
    intruder = sign_in(email="bia@example.com", nome="Bia")
    recipe_id = create_recipe(owner)

    res = client.put(
        f"/receitas/{recipe_id}", json={"titulo": "Hackeado"}, headers=intruder
    )

    assert res.status_code == 401
    assert client.get(f"/receitas/{recipe_id}").json()["titulo"] == "Pão com Ovo"


def test_update_without_token(client, sign_in, create_recipe):
    recipe_id = create_recipe(sign_in())

    res = client.put(f"/receitas/{recipe_id}", json={"titulo": "Outro"})

    assert res.status_code == 401


def test_update_unknown_recipe(client, sign_in):
    headers = sign_in()

    res = client.put(f"/receitas/{uuid.uuid4()}", json={"titulo": "X"}, headers=headers)
    assert res.status_code == 404

    res = client.put("/receitas/123", json={"titulo": "X"}, headers=headers)
    assert res.status_code == 404


def test_update_to_existing_title_conflicts(client, sign_in, create_recipe):
    headers = sign_in()
    create_recipe(headers, titulo="Primeira")
    second_id = create_recipe(headers, titulo="Segunda")

    res = client.put(
        f"/receitas/{second_id}", json={"titulo": "Primeira"}, headers=headers
    )

    assert res.status_code == 409


def test_delete_by_id(client, sign_in, create_recipe):
    recipe_id = create_recipe(sign_in())

    res = client.delete(f"/receitas/{recipe_id}")
    assert res.status_code == 200

    assert client.get(f"/receitas/{recipe_id}").status_code == 404
    assert client.delete(f"/receitas/{recipe_id}").status_code == 404


def test_delete_malformed_id_is_not_found(client: TestClient):
    assert client.delete("/receitas/abc").status_code == 404


def test_update_many_matches_ingredients_case_insensitively(
    client, sign_in, create_recipe
):
    headers = sign_in()
    create_recipe(headers, titulo="Omelete", ingredientes="OVO e queijo")
    create_recipe(headers, titulo="Pão com Ovo", ingredientes="Ovo e pão")
    untouched_id = create_recipe(headers, titulo="Torrada", ingredientes="pão")

    res = client.put("/receitas/muitas/ovo", json={"preparo": "novo"})

    assert res.status_code == 200
    assert res.json()["count"] == 2
    recipes = {r["titulo"]: r for r in client.get("/receitas").json()}
    assert recipes["Omelete"]["preparo"] == "novo"
    assert recipes["Pão com Ovo"]["preparo"] == "novo"
    assert client.get(f"/receitas/{untouched_id}").json()["preparo"] != "novo"


def test_update_many_without_matches(client, sign_in, create_recipe):
    create_recipe(sign_in())

    res = client.put("/receitas/muitas/chocolate", json={"preparo": "novo"})

    assert res.status_code == 404


def test_update_many_treats_wildcards_literally(client, sign_in, create_recipe):
    create_recipe(sign_in(), ingredientes="Ovo e pão")

    res = client.put("/receitas/muitas/_vo", json={"preparo": "novo"})

    assert res.status_code == 404


def test_delete_many_requires_exact_ingredients(client, sign_in, create_recipe):
    headers = sign_in()
    create_recipe(headers, titulo="A", ingredientes="ovo")
    create_recipe(headers, titulo="B", ingredientes="ovo")
    create_recipe(headers, titulo="C", ingredientes="ovo e pão")

    res = client.delete("/receitas/muitas/ovo")

    assert res.status_code == 200
    assert res.json()["count"] == 2
    assert [r["titulo"] for r in client.get("/receitas").json()] == ["C"]

    assert client.delete("/receitas/muitas/ovo").status_code == 404


def test_update_many_folds_accented_letters(client, sign_in, create_recipe):
    recipe_id = create_recipe(sign_in(), ingredientes="pão e manteiga")

    res = client.put(f"/receitas/muitas/{quote('PÃO')}", json={"preparo": "novo"})

    assert res.status_code == 200
    assert res.json()["count"] == 1
    assert client.get(f"/receitas/{recipe_id}").json()["preparo"] == "novo"


def test_list_filter_folds_accented_letters(client, sign_in, create_recipe):
    headers = sign_in()
    create_recipe(headers, titulo="Pudim", ingredientes="leite e açúcar")
    create_recipe(headers, titulo="Omelete", ingredientes="ovos")

    res = client.get("/receitas", params={"ingrediente": "AÇÚCAR"})

    assert res.status_code == 200
    assert [r["titulo"] for r in res.json()] == ["Pudim"]


def test_update_rejects_blank_fields(client, sign_in, create_recipe):
    headers = sign_in()
    recipe_id = create_recipe(headers)

    res = client.put(
        f"/receitas/{recipe_id}",
        json={"titulo": "", "ingredientes": "  "},
        headers=headers,
    )

    assert res.status_code == 422
    assert res.json() == [
        '"titulo" is not allowed to be empty',
        '"ingredientes" is not allowed to be empty',
    ]
    body = client.get(f"/receitas/{recipe_id}").json()
    assert body["titulo"] == "Pão com Ovo"
    assert body["ingredientes"] == "Ovo e pão"


def test_update_validates_fields_before_token(client, sign_in, create_recipe):
    recipe_id = create_recipe(sign_in())

    res = client.put(f"/receitas/{recipe_id}", json={"preparo": ""})

    assert res.status_code == 422


def test_update_many_rejects_blank_fields(client, sign_in, create_recipe):
    recipe_id = create_recipe(sign_in())

    res = client.put("/receitas/muitas/ovo", json={"titulo": " "})

    assert res.status_code == 422
    assert res.json() == ['"titulo" is not allowed to be empty']
    assert client.get(f"/receitas/{recipe_id}").json()["titulo"] == "Pão com Ovo"


def test_create_rejects_overlong_title(client, sign_in):
    res = client.post(
        "/receitas",
        json={"titulo": "x" * 256, "ingredientes": "Farinha", "preparo": "Asse"},
        headers=sign_in(),
    )

    assert res.status_code == 422
    assert res.json() == [
        '"titulo" length must be less than or equal to 255 characters long'
    ]


def test_store_failure_is_a_server_error(client: TestClient, monkeypatch):
    @check_local_db
    async def failing_list(self, ingredient=None, *, db=None):
        raise OperationalError(
            "SELECT * FROM receitas", {}, Exception("disk I/O error")
        )

    monkeypatch.setattr(RecipeDBHandler, "list_recipes", failing_list)

    res = client.get("/receitas")

    assert res.status_code == 500
    assert "disk I/O error" in res.json()["detail"]
