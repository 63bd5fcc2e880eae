from __future__ import annotations

from datetime import timedelta

import pytest

from contacts_api.auth.access_token_repository import AccessTokenRepository
from contacts_api.auth.access_token_service import AccessTokenService
from contacts_api.auth.auth_service import AuthenticationService
from contacts_api.config import AppConfig
from contacts_api.contacts.contacts_repository import ContactsRepository
from contacts_api.contacts.contacts_service import ContactsService
from contacts_api.security.passwords import PasswordHasher
from contacts_api.users.users_models import User
from contacts_api.users.users_repository import UsersRepository


@pytest.fixture
def users_repo(app_config: AppConfig) -> UsersRepository:
    return UsersRepository(app_config.session_factory)


@pytest.fixture
def token_repo(app_config: AppConfig) -> AccessTokenRepository:
    return AccessTokenRepository(app_config.session_factory)


@pytest.fixture
def contacts_repo(app_config: AppConfig) -> ContactsRepository:
    return ContactsRepository(app_config.session_factory)


@pytest.fixture
def token_service(
    app_config: AppConfig,
    token_repo: AccessTokenRepository,
    users_repo: UsersRepository,
) -> AccessTokenService:
    return AccessTokenService(
        tokens=token_repo,
        users=users_repo,
        signing_key=app_config.jwt_signing_key,
        token_ttl=timedelta(hours=1),
    )


@pytest.fixture
def auth_service(
    users_repo: UsersRepository, token_service: AccessTokenService
) -> AuthenticationService:
    return AuthenticationService(
        users=users_repo,
        access_tokens=token_service,
        hasher=PasswordHasher(iterations=1_000),
    )


@pytest.fixture
def contacts_service(contacts_repo: ContactsRepository) -> ContactsService:
    return ContactsService(contacts_repo)


@pytest.fixture
def alice(users_repo: UsersRepository) -> User:
    return users_repo.create(name="alice", email="alice@example.com", password_hash="x")


@pytest.fixture
def bob(users_repo: UsersRepository) -> User:
    return users_repo.create(name="bob", email="bob@example.com", password_hash="x")
