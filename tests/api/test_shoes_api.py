"""Endpoint tests for /api/shoes (store-assigned integer key)."""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from src.core.models import Shoe
from src.db.sql_repository import SQLShoeRepository


def test_admin_can_post_shoe(
    client: TestClient, admin_headers: dict[str, str], store: Callable
) -> None:
    response = client.post(
        "/api/shoes/post?name=Jordan&color=Red&brand=Nike", headers=admin_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body["id"], int)
    assert body == {"id": body["id"], "name": "Jordan", "color": "Red", "brand": "Nike"}
    assert store(SQLShoeRepository).find_by_key(body["id"]) == Shoe(
        id=body["id"], name="Jordan", color="Red", brand="Nike"
    )


def test_posted_shoes_get_distinct_ids(
    client: TestClient, admin_headers: dict[str, str]
) -> None:
    first = client.post(
        "/api/shoes/post?name=Jordan&color=Red&brand=Nike", headers=admin_headers
    ).json()
    second = client.post(
        "/api/shoes/post?name=Samba&color=White&brand=Adidas", headers=admin_headers
    ).json()

    assert second["id"] > first["id"]


def test_create_then_get(
    client: TestClient, admin_headers: dict[str, str], user_headers: dict[str, str]
) -> None:
    created = client.post(
        "/api/shoes/post?name=Jordan&color=Red&brand=Nike", headers=admin_headers
    ).json()

    response = client.get(f"/api/shoes?id={created['id']}", headers=user_headers)

    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_shoe(client: TestClient, user_headers: dict[str, str]) -> None:
    response = client.get("/api/shoes?id=7", headers=user_headers)

    assert response.status_code == 404
    assert response.json() == {
        "type": "EntityNotFoundException",
        "message": "Shoe with id 7 not found",
    }


def test_get_with_non_numeric_id(client: TestClient, user_headers: dict[str, str]) -> None:
    response = client.get("/api/shoes?id=seven", headers=user_headers)
    assert response.status_code == 422


def test_list_shoes(client: TestClient, user_headers: dict[str, str], store: Callable) -> None:
    repo = store(SQLShoeRepository)
    jordan = repo.save(Shoe(name="Jordan", color="Red", brand="Nike"))
    samba = repo.save(Shoe(name="Samba", color="White", brand="Adidas"))

    response = client.get("/api/shoes/all", headers=user_headers)

    assert response.status_code == 200
    assert response.json() == [
        {"id": jordan.id, "name": "Jordan", "color": "Red", "brand": "Nike"},
        {"id": samba.id, "name": "Samba", "color": "White", "brand": "Adidas"},
    ]


def test_admin_can_update_shoe(
    client: TestClient, admin_headers: dict[str, str], store: Callable
) -> None:
    jordan = store(SQLShoeRepository).save(Shoe(name="Jordan", color="Red", brand="Nike"))

    response = client.put(
        f"/api/shoes?id={jordan.id}",
        json={"id": jordan.id + 10, "name": "Air Jordan 1", "color": "Black", "brand": "Nike"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    expected = {"id": jordan.id, "name": "Air Jordan 1", "color": "Black", "brand": "Nike"}
    assert response.json() == expected
    assert store(SQLShoeRepository).find_all() == [Shoe(**expected)]


def test_update_missing_shoe(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.put(
        "/api/shoes?id=7",
        json={"name": "Jordan", "color": "Red", "brand": "Nike"},
        headers=admin_headers,
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Shoe with id 7 not found"


def test_admin_can_delete_shoe(
    client: TestClient, admin_headers: dict[str, str], store: Callable
) -> None:
    jordan = store(SQLShoeRepository).save(Shoe(name="Jordan", color="Red", brand="Nike"))

    response = client.delete(f"/api/shoes?id={jordan.id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": f"Shoe with id {jordan.id} deleted"}
    assert store(SQLShoeRepository).find_all() == []


def test_delete_missing_shoe(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.delete("/api/shoes?id=7", headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {
        "type": "EntityNotFoundException",
        "message": "Shoe with id 7 not found",
    }


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_id_beyond_integer_range_is_not_found(
    client: TestClient, admin_headers: dict[str, str], method: str
) -> None:
    kwargs: dict = {"headers": admin_headers}
    if method == "put":
        kwargs["json"] = {"name": "Jordan", "color": "Red", "brand": "Nike"}

    response = client.request(method, "/api/shoes?id=99999999999999999999", **kwargs)

    assert response.status_code == 404
    assert response.json() == {
        "type": "EntityNotFoundException",
        "message": "Shoe with id 99999999999999999999 not found",
    }
