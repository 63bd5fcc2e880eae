"""Persistence layer for access token records."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..db.db_models import AccessTokenModel
from .auth_models import AccessToken


class AccessTokenRepository:
    """Store issued tokens so they can be revoked before they expire."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create(
        self,
        *,
        token_id: str,
        user_id: int,
        created_at: datetime,
        expires_at: datetime,
    ) -> AccessToken:
        with self._session_factory() as session:
            model = AccessTokenModel(
                id=token_id,
                user_id=user_id,
                revoked=False,
                created_at=created_at,
                expires_at=expires_at,
            )
            session.add(model)
            session.commit()
            return self._to_domain(model)

    def find(self, token_id: str) -> AccessToken | None:
        with self._session_factory() as session:
            model = session.get(AccessTokenModel, token_id)
            if model is None:
                return None
            return self._to_domain(model)

    def revoke(self, token_id: str) -> bool:
        """Flag the token as revoked; return ``False`` when it does not exist."""
        with self._session_factory() as session:
            model = session.get(AccessTokenModel, token_id)
            if model is None:
                return False
            model.revoked = True
            session.commit()
            return True

    def list_expired(self, now: datetime) -> list[AccessToken]:
        with self._session_factory() as session:
            stmt = (
                select(AccessTokenModel)
                .where(AccessTokenModel.expires_at <= now)
                .order_by(AccessTokenModel.expires_at)
            )
            return [self._to_domain(model) for model in session.scalars(stmt)]

    def purge_expired(self, now: datetime) -> int:
        """Delete rows whose ``expires_at`` is at or before ``now`` (naive UTC)."""
        with self._session_factory() as session:
            result = session.execute(
                delete(AccessTokenModel).where(AccessTokenModel.expires_at <= now)
            )
            session.commit()
            return result.rowcount or 0

    @staticmethod
    def _to_domain(model: AccessTokenModel) -> AccessToken:
        return AccessToken(
            id=model.id,
            user_id=model.user_id,
            revoked=model.revoked,
            created_at=model.created_at,
            expires_at=model.expires_at,
        )
