"""Contacts CRUD routes."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from ..api.errors import parse_payload
from ..auth.auth_dependencies import require_user
from ..exceptions import ValidationError
from ..users.users_models import User
from .contacts_models import Contact
from .contacts_schemas import (
    ContactData,
    ContactPayload,
    ContactResponse,
    ContactSchema,
    ContactsData,
    ContactsResponse,
)
from .contacts_service import ContactsService

router = APIRouter(prefix="/contacts", tags=["contacts"])


def get_contacts_service(request: Request) -> ContactsService:
    try:
        return request.app.state.contacts_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("ContactsService is not configured") from exc


async def contact_body(request: Request, _: User = Depends(require_user)) -> bytes:
    """Read the raw body once the caller is known to hold a valid token."""

    return await request.body()


def _parse_contact(raw: bytes) -> ContactPayload:
    payload: Any = None
    if raw.strip():
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValidationError({"body": ["Malformed JSON body."]}) from exc
    return parse_payload(ContactPayload, payload)


def _contact_response(contact: Contact) -> ContactResponse:
    return ContactResponse(data=ContactData(contact=ContactSchema(**contact.to_dict())))


@router.get("", response_model=ContactsResponse)
def index(
    user: User = Depends(require_user),
    service: ContactsService = Depends(get_contacts_service),
) -> ContactsResponse:
    contacts = service.list_contacts(user)
    return ContactsResponse(
        data=ContactsData(
            contacts=[ContactSchema(**contact.to_dict()) for contact in contacts]
        )
    )


@router.post("", response_model=ContactResponse)
def store(
    body: bytes = Depends(contact_body),
    user: User = Depends(require_user),
    service: ContactsService = Depends(get_contacts_service),
) -> ContactResponse:
    fields = _parse_contact(body)
    contact = service.create(user, fields.model_dump())
    return _contact_response(contact)


@router.get("/{contact_id}/edit", response_model=ContactResponse)
def edit(
    contact_id: int,
    user: User = Depends(require_user),
    service: ContactsService = Depends(get_contacts_service),
) -> ContactResponse:
    return _contact_response(service.edit(user, contact_id))


@router.put("/{contact_id}", response_model=ContactResponse)
def update(
    contact_id: int,
    body: bytes = Depends(contact_body),
    user: User = Depends(require_user),
    service: ContactsService = Depends(get_contacts_service),
) -> ContactResponse:
    # Fixes the check order only: 404/403 before 422. ContactsService.update
    # repeats the lookup for callers that skip the router.
    service.edit(user, contact_id)
    fields = _parse_contact(body)
    contact = service.update(user, contact_id, fields.model_dump(exclude_unset=True))
    return _contact_response(contact)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def destroy(
    contact_id: int,
    user: User = Depends(require_user),
    service: ContactsService = Depends(get_contacts_service),
) -> Response:
    service.destroy(user, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
