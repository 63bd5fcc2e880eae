"""Contact repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from ..db.db_models import ContactModel
from ..exceptions import ContactNotFoundError
from .contacts_models import Contact

EDITABLE_FIELDS = ("first_name", "last_name", "email", "phone_number")


class ContactsRepository:
    """Provide access to contacts stored in the database."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def list_for_user(self, user_id: int) -> Sequence[Contact]:
        with self._session_factory() as session:
            rows = (
                session.query(ContactModel)
                .filter(ContactModel.user_id == user_id)
                .order_by(ContactModel.id)
                .all()
            )
            return [self._to_domain(row) for row in rows]

    def get(self, contact_id: int) -> Contact:
        with self._session_factory() as session:
            row = session.get(ContactModel, contact_id)
            if row is None:
                raise ContactNotFoundError()
            return self._to_domain(row)

    def create(self, user_id: int, fields: Mapping[str, Any]) -> Contact:
        now = datetime.utcnow()
        with self._session_factory() as session:
            row = ContactModel(
                user_id=user_id,
                created_at=now,
                updated_at=now,
                **{name: fields.get(name) for name in EDITABLE_FIELDS},
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def update(self, contact_id: int, fields: Mapping[str, Any]) -> Contact:
        """Persist ``fields`` onto the contact and return the updated object."""
        with self._session_factory() as session:
            row = session.get(ContactModel, contact_id)
            if row is None:
                raise ContactNotFoundError()
            for name in EDITABLE_FIELDS:
                if name in fields:
                    setattr(row, name, fields[name])
            row.updated_at = datetime.utcnow()
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def delete(self, contact_id: int) -> None:
        with self._session_factory() as session:
            row = session.get(ContactModel, contact_id)
            if row is None:
                raise ContactNotFoundError()
            session.delete(row)
            session.commit()

    @staticmethod
    def _to_domain(model: ContactModel) -> Contact:
        return Contact(
            id=model.id,
            user_id=model.user_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone_number=model.phone_number,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
