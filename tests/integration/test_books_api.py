"""End-to-end tests for the book collection endpoints."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import select

from src.bookshelf.api.http import deps
from src.bookshelf.entities.core.user import UserTable
from src.bookshelf.runtime.config.config_data import AuthConfig
from src.bookshelf.runtime.context import get_config
from tests.utils import bearer, book_payload

BOOKS = "/api/books/"


def _create(client: TestClient, **overrides) -> dict:
    response = client.post(BOOKS, json=book_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateBook:
    def test_create_example_book(self, client: TestClient):
        response = client.post(BOOKS, json=book_payload())

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert {k: body[k] for k in ("title", "author", "published_date")} == book_payload()

    def test_create_then_retrieve_round_trip(self, client: TestClient):
        created = _create(client)

        response = client.get(f"{BOOKS}{created['id']}/")

        assert response.status_code == 200
        assert response.json() == created

    def test_client_supplied_id_is_ignored(self, client: TestClient):
        first = _create(client)

        body = _create(client, id=first["id"], title="Another")

        assert body["id"] != first["id"]

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"title": ""}, "title"),
            ({"title": "   "}, "title"),
            ({"author": ""}, "author"),
            ({"title": "t" * 201}, "title"),
            ({"author": "a" * 101}, "author"),
            ({"published_date": "01/12/2023"}, "published_date"),
            ({"published_date": "2023-02-30"}, "published_date"),
        ],
    )
    def test_invalid_field_rejected(self, client: TestClient, overrides, field):
        response = client.post(BOOKS, json=book_payload(**overrides))

        assert response.status_code == 400
        assert list(response.json()) == [field]
        assert client.get(BOOKS).json() == []

    def test_missing_fields_reported_per_field(self, client: TestClient):
        response = client.post(BOOKS, json={"title": "Only a title"})

        assert response.status_code == 400
        assert response.json() == {
            "author": ["This field is required."],
            "published_date": ["This field is required."],
        }
        assert client.get(BOOKS).json() == []

    def test_malformed_json(self, client: TestClient):
        response = client.post(
            BOOKS, content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "non_field_errors" in response.json()

    def test_non_object_body(self, client: TestClient):
        response = client.post(BOOKS, json=["Discreet Math"])

        assert response.status_code == 400
        assert "non_field_errors" in response.json()


class TestListBooks:
    def test_empty_collection(self, client: TestClient):
        response = client.get(BOOKS)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_every_book_with_unique_ids(self, client: TestClient):
        created = [_create(client, title=f"Volume {i}") for i in range(5)]

        books = client.get(BOOKS).json()

        assert len(books) == 5
        assert len({book["id"] for book in books}) == 5
        assert sorted(books, key=lambda b: b["id"]) == sorted(created, key=lambda b: b["id"])


class TestRetrieveBook:
    def test_nonexistent_id(self, client: TestClient):
        response = client.get(f"{BOOKS}9999/")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not found."}

    def test_non_integer_id(self, client: TestClient):
        assert client.get(f"{BOOKS}abc/").status_code == 404


class TestOutOfRangeId:
    """Ids beyond the 64-bit INTEGER range behave like any unknown id."""

    HUGE_ID = 2**63

    @pytest.mark.parametrize(
        "method,body",
        [
            ("GET", None),
            ("PUT", {"title": "Ghost"}),
            ("PATCH", {"title": "Ghost"}),
            ("DELETE", None),
        ],
    )
    def test_returns_not_found(self, client: TestClient, method, body):
        response = client.request(method, f"{BOOKS}{self.HUGE_ID}/", json=body)

        assert response.status_code == 404
        assert response.json() == {"detail": "Not found."}


class TestUpdateBook:
    def test_put_changes_only_supplied_fields(self, client: TestClient):
        created = _create(client)

        response = client.put(f"{BOOKS}{created['id']}/", json={"author": "R. Sharma"})

        assert response.status_code == 200
        assert response.json() == {**created, "author": "R. Sharma"}
        assert client.get(f"{BOOKS}{created['id']}/").json() == {**created, "author": "R. Sharma"}

    def test_put_full_record(self, client: TestClient):
        created = _create(client)
        replacement = book_payload(title="Concrete Math", author="Knuth", published_date="1989-01-01")

        response = client.put(f"{BOOKS}{created['id']}/", json=replacement)

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **replacement}

    def test_patch_changes_only_supplied_fields(self, client: TestClient):
        created = _create(client)

        response = client.patch(f"{BOOKS}{created['id']}/", json={"published_date": "2024-01-15"})

        assert response.status_code == 200
        assert response.json() == {**created, "published_date": "2024-01-15"}

    def test_update_ignores_id_in_body(self, client: TestClient):
        created = _create(client)

        response = client.put(f"{BOOKS}{created['id']}/", json={"id": 42, "title": "Renamed"})

        assert response.json()["id"] == created["id"]

    @pytest.mark.parametrize("method", ["put", "patch"])
    def test_update_nonexistent_id(self, client: TestClient, method):
        response = client.request(method.upper(), f"{BOOKS}9999/", json={"title": "Ghost"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Not found."}

    def test_update_with_invalid_value(self, client: TestClient):
        created = _create(client)

        response = client.put(f"{BOOKS}{created['id']}/", json={"title": ""})

        assert response.status_code == 400
        assert "title" in response.json()
        assert client.get(f"{BOOKS}{created['id']}/").json() == created

    def test_update_with_null_value(self, client: TestClient):
        created = _create(client)

        response = client.patch(f"{BOOKS}{created['id']}/", json={"author": None})

        assert response.status_code == 400
        assert response.json() == {"author": ["This field may not be null."]}


class TestDeleteBook:
    def test_delete_removes_book(self, client: TestClient):
        kept = _create(client, title="Kept")
        removed = _create(client, title="Removed")

        response = client.delete(f"{BOOKS}{removed['id']}/")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BOOKS}{removed['id']}/").status_code == 404
        assert client.get(BOOKS).json() == [kept]

    def test_delete_nonexistent_id(self, client: TestClient):
        response = client.delete(f"{BOOKS}9999/")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not found."}


class TestProtectedBooks:
    """With ``auth.protect_books`` enabled every book operation needs an access token."""

    @pytest.fixture(autouse=True)
    def protect_books(self, monkeypatch):
        config = get_config()
        protected = config.model_copy(
            update={"auth": AuthConfig(protect_books=True, password_hash_iterations=1000)}
        )
        monkeypatch.setattr(deps, "get_config", lambda: protected)

    def test_anonymous_request_rejected(self, client: TestClient):
        response = client.get(BOOKS)

        assert response.status_code == 401
        assert response.json() == {"detail": "Authentication credentials were not provided."}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_access_token_accepted(self, client: TestClient, token_pair):
        headers = bearer(token_pair["access"])

        created = client.post(BOOKS, json=book_payload(), headers=headers)
        listed = client.get(BOOKS, headers=headers)

        assert created.status_code == 201
        assert listed.json() == [created.json()]

    def test_refresh_token_rejected(self, client: TestClient, token_pair):
        response = client.get(BOOKS, headers=bearer(token_pair["refresh"]))

        assert response.status_code == 401
        assert response.json()["code"] == "token_not_valid"

    def test_invalid_token_rejected(self, client: TestClient):
        response = client.get(BOOKS, headers=bearer("garbage"))

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Token is invalid or expired",
            "code": "token_not_valid",
        }

    def test_deactivated_user_rejected(self, client: TestClient, token_pair, app_deps):
        with app_deps.database_service.session_scope() as db:
            row = db.exec(select(UserTable)).one()
            row.is_active = False
            db.add(row)

        response = client.get(BOOKS, headers=bearer(token_pair["access"]))

        assert response.status_code == 401
        assert response.json()["code"] == "user_not_found"
