from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from contacts_api.config import AppConfig, build_config
from contacts_api.main import create_app

TEST_SIGNING_KEY = "test-signing-key-0123456789abcdef0123456789"


@pytest.fixture
def app_config() -> AppConfig:
    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return build_config(
        "sqlite://",
        jwt_signing_key=TEST_SIGNING_KEY,
        access_token_ttl_hours=1,
        password_hash_iterations=1_000,
        engine=engine,
    )


@pytest.fixture
def app(app_config: AppConfig) -> FastAPI:
    return create_app(app_config)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client: TestClient) -> Callable[..., str]:
    """Return a helper that registers a user and yields its bearer token."""

    def _register(name: str, password: str = "secret-pass") -> str:
        response = client.post(
            "/api/user/register",
            json={"name": name, "email": f"{name}@example.com", "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _register
