"""Dependency wiring helpers."""

from datetime import timedelta

from fastapi import FastAPI

from .api.errors import install_error_handlers
from .auth.access_token_repository import AccessTokenRepository
from .auth.access_token_service import AccessTokenService
from .auth.auth_api import router as auth_router
from .auth.auth_service import AuthenticationService
from .config import AppConfig
from .contacts.contacts_api import router as contacts_router
from .contacts.contacts_repository import ContactsRepository
from .contacts.contacts_service import ContactsService
from .security.passwords import PasswordHasher
from .users.users_repository import UsersRepository


def include_routers(app: FastAPI, config: AppConfig) -> None:
    """Mount module routers and attach services."""
    users_repo = UsersRepository(config.session_factory)
    token_repo = AccessTokenRepository(config.session_factory)
    contacts_repo = ContactsRepository(config.session_factory)

    access_token_service = AccessTokenService(
        tokens=token_repo,
        users=users_repo,
        signing_key=config.jwt_signing_key,
        token_ttl=timedelta(hours=config.access_token_ttl_hours),
    )
    auth_service = AuthenticationService(
        users=users_repo,
        access_tokens=access_token_service,
        hasher=PasswordHasher(iterations=config.password_hash_iterations),
    )
    contacts_service = ContactsService(contacts_repo)

    app.state.config = config
    app.state.users_repo = users_repo
    app.state.access_token_service = access_token_service
    app.state.auth_service = auth_service
    app.state.contacts_service = contacts_service

    install_error_handlers(app)
    app.include_router(auth_router, prefix=config.api_prefix)
    app.include_router(contacts_router, prefix=config.api_prefix)
