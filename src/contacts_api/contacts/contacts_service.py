"""Contact CRUD scoped to the owning user."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from ..exceptions import ForbiddenError
from ..users.users_models import User
from .contacts_models import Contact
from .contacts_repository import ContactsRepository

logger = structlog.get_logger(__name__)


class ContactsService:
    """Every operation takes the authenticated user and enforces ownership.

    Lookups raise ``ContactNotFoundError`` for unknown ids before ownership is
    considered, and ``ForbiddenError`` when the contact belongs to someone
    else.
    """

    def __init__(self, repo: ContactsRepository) -> None:
        self._repo = repo

    def list_contacts(self, user: User) -> Sequence[Contact]:
        return self._repo.list_for_user(user.id)

    def create(self, user: User, fields: Mapping[str, Any]) -> Contact:
        contact = self._repo.create(user.id, fields)
        logger.info("contacts.created", user_id=user.id, contact_id=contact.id)
        return contact

    def edit(self, user: User, contact_id: int) -> Contact:
        """Return the contact if ``user`` may modify it."""
        contact = self._repo.get(contact_id)
        if not contact.belongs_to(user.id):
            logger.warning(
                "contacts.forbidden",
                user_id=user.id,
                contact_id=contact_id,
                owner_id=contact.user_id,
            )
            raise ForbiddenError()
        return contact

    def update(self, user: User, contact_id: int, fields: Mapping[str, Any]) -> Contact:
        self.edit(user, contact_id)
        contact = self._repo.update(contact_id, fields)
        logger.info("contacts.updated", user_id=user.id, contact_id=contact_id)
        return contact

    def destroy(self, user: User, contact_id: int) -> None:
        self.edit(user, contact_id)
        self._repo.delete(contact_id)
        logger.info("contacts.deleted", user_id=user.id, contact_id=contact_id)


__all__ = ["ContactsService"]
