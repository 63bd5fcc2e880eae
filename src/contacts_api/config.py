"""Application configuration builder."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .db.db_init import init_db
from .security.passwords import DEFAULT_ITERATIONS


@dataclass(slots=True)
class AppConfig:
    database_url: str
    engine: Engine
    session_factory: sessionmaker[Session]
    jwt_signing_key: str
    access_token_ttl_hours: int
    api_prefix: str
    password_hash_iterations: int


def build_config(
    database_url: str,
    *,
    jwt_signing_key: str,
    access_token_ttl_hours: int = 24,
    api_prefix: str = "/api",
    password_hash_iterations: int = DEFAULT_ITERATIONS,
    engine: Engine | None = None,
) -> AppConfig:
    """Create engine/session factory for ``database_url`` and ensure the schema."""
    if not jwt_signing_key:
        raise RuntimeError("JWT_SIGNING_KEY is not configured")
    if access_token_ttl_hours < 1:
        raise ValueError("ACCESS_TOKEN_TTL_HOURS must be positive")

    engine = engine or create_engine(database_url, future=True)
    session_factory: sessionmaker[Session] = sessionmaker(bind=engine, expire_on_commit=False)
    init_db(engine)

    return AppConfig(
        database_url=database_url,
        engine=engine,
        session_factory=session_factory,
        jwt_signing_key=jwt_signing_key,
        access_token_ttl_hours=access_token_ttl_hours,
        api_prefix=api_prefix.rstrip("/"),
        password_hash_iterations=password_hash_iterations,
    )


def load_config() -> AppConfig:
    """Load configuration from environment (SQLite by default)."""
    load_dotenv(".env", override=False)

    return build_config(
        os.getenv("DATABASE_URL", "sqlite:///contacts.db"),
        jwt_signing_key=os.getenv("JWT_SIGNING_KEY", ""),
        access_token_ttl_hours=int(os.getenv("ACCESS_TOKEN_TTL_HOURS", 24)),
        api_prefix=os.getenv("API_PREFIX", "/api"),
        password_hash_iterations=int(
            os.getenv("PASSWORD_HASH_ITERATIONS", DEFAULT_ITERATIONS)
        ),
    )
