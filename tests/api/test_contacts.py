from __future__ import annotations

import pytest
from fastapi import status

pytestmark = pytest.mark.integration


@pytest.fixture
def owner_token(register_user) -> str:
    return register_user("owner")


@pytest.fixture
def stranger_token(register_user) -> str:
    return register_user("stranger")


def _create(client, token: str, **fields) -> dict:
    response = client.post(
        "/api/contacts", json=fields, headers={"Authorization": token}
    )
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()["data"]["contact"]


def test_create_and_list_contacts(client, owner_token) -> None:
    contact = _create(client, owner_token, first_name="Ann", last_name="Lee")

    response = client.get("/api/contacts", headers={"Authorization": owner_token})

    assert response.status_code == status.HTTP_200_OK
    contacts = response.json()["data"]["contacts"]
    assert [c["id"] for c in contacts] == [contact["id"]]
    assert contacts[0]["last_name"] == "Lee"


def test_list_only_shows_own_contacts(client, owner_token, stranger_token) -> None:
    _create(client, owner_token, first_name="Ann")
    _create(client, stranger_token, first_name="Cid")

    response = client.get("/api/contacts", headers={"Authorization": stranger_token})

    assert [c["first_name"] for c in response.json()["data"]["contacts"]] == ["Cid"]


def test_create_without_first_name_returns_errors(client, owner_token) -> None:
    response = client.post(
        "/api/contacts", json={"last_name": "Lee"}, headers={"Authorization": owner_token}
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert "first_name" in response.json()["errors"]


def test_edit_own_contact(client, owner_token) -> None:
    contact = _create(client, owner_token, first_name="Ann")

    response = client.get(
        f"/api/contacts/{contact['id']}/edit", headers={"Authorization": owner_token}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["contact"] == contact


def test_update_own_contact_with_full_payload(client, owner_token) -> None:
    contact = _create(client, owner_token, first_name="Ann", last_name="Lee")
    contact["last_name"] += "."

    response = client.put(
        f"/api/contacts/{contact['id']}", json=contact, headers={"Authorization": owner_token}
    )

    assert response.status_code == status.HTTP_200_OK
    updated = response.json()["data"]["contact"]
    assert updated["last_name"] == "Lee."
    assert updated["user_id"] == contact["user_id"]


def test_update_with_empty_payload_returns_errors(client, owner_token) -> None:
    contact = _create(client, owner_token, first_name="Ann")

    response = client.put(
        f"/api/contacts/{contact['id']}", json={}, headers={"Authorization": owner_token}
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert "errors" in response.json()


def test_foreign_contact_is_forbidden(client, owner_token, stranger_token) -> None:
    contact = _create(client, owner_token, first_name="Ann")
    headers = {"Authorization": stranger_token}
    url = f"/api/contacts/{contact['id']}"

    responses = [
        client.get(f"{url}/edit", headers=headers),
        client.put(url, json={"first_name": "Hacked"}, headers=headers),
        client.delete(url, headers=headers),
    ]

    assert [r.status_code for r in responses] == [status.HTTP_403_FORBIDDEN] * 3
    assert all("message" in r.json() for r in responses)
    still_there = client.get(f"{url}/edit", headers={"Authorization": owner_token})
    assert still_there.json()["data"]["contact"]["first_name"] == "Ann"


def test_delete_twice_returns_not_found(client, owner_token) -> None:
    contact = _create(client, owner_token, first_name="Ann")
    url = f"/api/contacts/{contact['id']}"
    headers = {"Authorization": owner_token}

    first = client.delete(url, headers=headers)
    second = client.delete(url, headers=headers)

    assert first.status_code == status.HTTP_204_NO_CONTENT
    assert second.status_code == status.HTTP_404_NOT_FOUND
    assert "message" in second.json()
    assert client.get(f"{url}/edit", headers=headers).status_code == status.HTTP_404_NOT_FOUND
    assert (
        client.put(url, json={"first_name": "Ann"}, headers=headers).status_code
        == status.HTTP_404_NOT_FOUND
    )


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/api/user"),
        ("post", "/api/user/logout"),
        ("get", "/api/contacts"),
        ("post", "/api/contacts"),
        ("get", "/api/contacts/1/edit"),
        ("put", "/api/contacts/1"),
        ("delete", "/api/contacts/1"),
    ],
)
def test_authenticated_routes_reject_missing_header(client, method: str, path: str) -> None:
    kwargs = {"json": {"first_name": "Ann"}} if method in ("post", "put") else {}

    response = client.request(method.upper(), path, **kwargs)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert "message" in response.json()


def test_revoked_token_cannot_manage_contacts(client, owner_token) -> None:
    client.post("/api/user/logout", headers={"Authorization": owner_token})

    response = client.get("/api/contacts", headers={"Authorization": owner_token})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.parametrize(("method", "path"), [("post", "/api/contacts"), ("put", "/api/contacts/1")])
def test_malformed_body_without_token_is_unauthorized(client, method: str, path: str) -> None:
    response = client.request(
        method.upper(),
        path,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert "message" in response.json()


def test_malformed_body_with_token_returns_errors(client, owner_token) -> None:
    response = client.post(
        "/api/contacts",
        content=b"{not json",
        headers={"Authorization": owner_token, "Content-Type": "application/json"},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert "body" in response.json()["errors"]
