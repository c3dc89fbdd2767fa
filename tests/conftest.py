"""
This file contains shared fixtures and configuration for the test suite.

Pytest will automatically discover and use the fixtures defined in this file.

The application database is pointed at a throwaway SQLite file before any
application module is imported, and every test starts from empty tables.
"""

import os
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="receitas-tests-"))
_TEST_DB_PATH = _TEST_DIR / "receitas_test.db"

os.environ["RECEITAS_DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_PATH}"
os.environ["LOG_DIR"] = str(_TEST_DIR / "logs")
os.environ["LOG_LEVEL"] = "WARNING"
# Cheap hashes keep the suite fast
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402


@pytest.fixture(autouse=True)
def clean_database() -> Generator[None, None, None]:
    """
    Drop and recreate all tables before each test.

    Uses a plain synchronous engine on the same file so that no event loop
    is involved in the reset.
    """
    from receitas.models.base import Base

    engine = create_engine(f"sqlite:///{_TEST_DB_PATH}")
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    engine.dispose()
    yield


@pytest.fixture(scope="session")
def app() -> FastAPI:
    """
    Create a new application instance for the test session.
    """
    # Import the factory function here so the environment above is already in place.
    from main import create_app

    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Fixture to get a test client for making API requests.
    The TestClient handles the application's lifespan events (startup/shutdown).
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sign_in(client: TestClient) -> Callable[..., dict[str, str]]:
    """
    Register (if needed) and sign in a user, returning ready-to-use auth headers.
    """

    def _sign_in(
        email: str = "ana@example.com", senha: str = "123", nome: str = "Ana"
    ) -> dict[str, str]:
        client.post("/sign-up", json={"nome": nome, "email": email, "senha": senha})
        res = client.post("/sign-in", json={"email": email, "senha": senha})
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.text}"}

    return _sign_in


@pytest.fixture
def create_recipe(client: TestClient) -> Callable[..., str]:
    """
    Create a recipe through the API and return its id.
    """

    def _create(
        headers: dict[str, str],
        titulo: str = "Pão com Ovo",
        ingredientes: str = "Ovo e pão",
        preparo: str = "Frite o ovo e coloque no pão",
    ) -> str:
        res = client.post(
            "/receitas",
            json={"titulo": titulo, "ingredientes": ingredientes, "preparo": preparo},
            headers=headers,
        )
        assert res.status_code == 201, res.text
        return res.json()["id"]

    return _create
