from datetime import timedelta

import jwt
import pytest

from contacts_api.auth.access_token_repository import AccessTokenRepository
from contacts_api.auth.access_token_service import AccessTokenService
from contacts_api.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
    TokenRevokedError,
    UserNotFoundError,
)
from contacts_api.users.users_models import User
from contacts_api.users.users_repository import UsersRepository


def test_create_token_persists_record(
    token_service: AccessTokenService, token_repo: AccessTokenRepository, alice: User
) -> None:
    token = token_service.create_token(alice)

    payload = jwt.decode(token, options={"verify_signature": False})
    record = token_repo.find(payload["jti"])
    assert record is not None
    assert record.user_id == alice.id
    assert record.revoked is False
    assert record.expires_at > record.created_at


def test_get_token_user_resolves_owner(token_service: AccessTokenService, alice: User) -> None:
    token = token_service.create_token(alice)

    user = token_service.get_token_user(token)

    assert user.id == alice.id
    assert user.name == "alice"


def test_tampered_token_is_rejected(token_service: AccessTokenService, alice: User) -> None:
    token = token_service.create_token(alice)

    with pytest.raises(InvalidTokenError):
        token_service.get_token_user(token + ".")


def test_token_signed_with_other_key_is_rejected(
    token_service: AccessTokenService,
    token_repo: AccessTokenRepository,
    users_repo: UsersRepository,
    alice: User,
) -> None:
    forger = AccessTokenService(
        tokens=token_repo,
        users=users_repo,
        signing_key="another-signing-key-0123456789abcdef01234567",
        token_ttl=timedelta(hours=1),
    )
    token = forger.create_token(alice)

    with pytest.raises(InvalidTokenError):
        token_service.get_token_user(token)


def test_unknown_token_id_is_rejected(
    token_service: AccessTokenService,
    app_config,
    alice: User,
) -> None:
    forged = jwt.encode(
        {"sub": str(alice.id), "jti": "missing", "iat": 0, "exp": 4_102_444_800},
        app_config.jwt_signing_key,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        token_service.get_token_user(forged)


def test_expired_token_is_rejected(
    token_repo: AccessTokenRepository,
    users_repo: UsersRepository,
    app_config,
    alice: User,
) -> None:
    service = AccessTokenService(
        tokens=token_repo,
        users=users_repo,
        signing_key=app_config.jwt_signing_key,
        token_ttl=timedelta(seconds=-30),
    )
    token = service.create_token(alice)

    with pytest.raises(TokenExpiredError):
        service.get_token_user(token)


def test_revoked_token_is_rejected(token_service: AccessTokenService, alice: User) -> None:
    token = token_service.create_token(alice)

    token_service.revoke_token(token)

    with pytest.raises(TokenRevokedError):
        token_service.get_token_user(token)
    assert token_service.get_access_token(token).revoked is True


def test_revoke_is_idempotent(token_service: AccessTokenService, alice: User) -> None:
    token = token_service.create_token(alice)

    token_service.revoke_token(token)
    token_service.revoke_token(token)

    assert token_service.get_access_token(token).revoked is True


def test_revoking_one_token_keeps_others_valid(
    token_service: AccessTokenService, alice: User
) -> None:
    first = token_service.create_token(alice)
    second = token_service.create_token(alice)

    token_service.revoke_token(first)

    assert token_service.get_token_user(second).id == alice.id


def test_token_of_deleted_user_is_rejected(
    token_service: AccessTokenService, app_config, alice: User
) -> None:
    from contacts_api.db.db_models import UserModel

    token = token_service.create_token(alice)
    with app_config.session_factory() as session:
        session.delete(session.get(UserModel, alice.id))
        session.commit()

    with pytest.raises((InvalidTokenError, UserNotFoundError)):
        token_service.get_token_user(token)
