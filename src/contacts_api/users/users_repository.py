"""User repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db.db_models import UserModel
from ..exceptions import UserAlreadyExistsError, UserNotFoundError
from .users_models import User


class UsersRepository:
    """Provide access to registered users."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create(self, *, name: str, email: str, password_hash: str) -> User:
        now = datetime.utcnow()
        with self._session_factory() as session:
            model = UserModel(
                name=name,
                email=email,
                password=password_hash,
                created_at=now,
                updated_at=now,
            )
            session.add(model)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise UserAlreadyExistsError() from exc
            session.refresh(model)
            return self._to_domain(model)

    def exists(self, *, name: str, email: str) -> bool:
        with self._session_factory() as session:
            row = (
                session.query(UserModel.id)
                .filter(or_(UserModel.name == name, UserModel.email == email))
                .first()
            )
            return row is not None

    def get(self, user_id: int) -> User:
        with self._session_factory() as session:
            model = session.get(UserModel, user_id)
            if model is None:
                raise UserNotFoundError()
            return self._to_domain(model)

    def get_by_name(self, name: str) -> User:
        with self._session_factory() as session:
            model = (
                session.query(UserModel)
                .filter(UserModel.name == name)
                .one_or_none()
            )
            if model is None:
                raise UserNotFoundError()
            return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
