"""HTTP tests for the /books endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.http.routers.book import MAX_BOOK_ID
from bookshelf.entities.book import BookRepository


def _create(client: TestClient, title: str | None, author: str | None) -> dict:
    response = client.post("/books", json={"title": title, "author": author})
    assert response.status_code == 200
    return response.json()


class TestBookLifecycle:
    """Walk a single book through every operation."""

    def test_full_lifecycle(self, client: TestClient):
        created = client.post("/books", json={"title": "Dune", "author": "Herbert"})
        assert created.status_code == 200
        assert created.json() == {"id": 1, "title": "Dune", "author": "Herbert"}

        fetched = client.get("/books/1")
        assert fetched.status_code == 200
        assert fetched.json() == {"id": 1, "title": "Dune", "author": "Herbert"}

        updated = client.put("/books/1", json={"title": "Dune (rev)", "author": "Herbert"})
        assert updated.status_code == 200
        assert updated.json() == {"id": 1, "title": "Dune (rev)", "author": "Herbert"}

        deleted = client.delete("/books/1")
        assert deleted.status_code == 204
        assert deleted.content == b""

        missing = client.get("/books/1")
        assert missing.status_code == 404
        assert missing.json()["detail"] == "Book not found"


class TestListBooks:
    def test_empty(self, client: TestClient):
        response = client.get("/books")

        assert response.status_code == 200
        assert response.json() == []

    def test_returns_every_created_book(self, client: TestClient):
        titles = ["Dune", "Emma", "Ulysses", "Beloved"]
        for title in titles:
            _create(client, title, "Someone")

        response = client.get("/books")

        assert response.status_code == 200
        books = response.json()
        assert len(books) == len(titles)
        assert sorted(book["title"] for book in books) == sorted(titles)


class TestCreateBook:
    def test_create_then_get_round_trips_fields(self, client: TestClient):
        created = _create(client, "Emma", "Austen")

        fetched = client.get(f"/books/{created['id']}").json()

        assert fetched["title"] == "Emma"
        assert fetched["author"] == "Austen"

    def test_client_id_is_ignored(self, client: TestClient):
        _create(client, "First", "A")

        response = client.post("/books", json={"id": 500, "title": "Second", "author": "B"})

        assert response.status_code == 200
        assert response.json()["id"] != 500
        assert client.get("/books/500").status_code == 404

    def test_missing_fields_are_stored_as_null(self, client: TestClient):
        response = client.post("/books", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["title"] is None
        assert body["author"] is None

    def test_non_string_title_is_rejected(self, client: TestClient):
        response = client.post("/books", json={"title": 123, "author": "Herbert"})

        assert response.status_code == 422

    def test_missing_body_is_rejected(self, client: TestClient):
        response = client.post("/books")

        assert response.status_code == 422


class TestGetBook:
    def test_not_found(self, client: TestClient):
        response = client.get("/books/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Book not found"

    def test_non_integer_id_is_rejected(self, client: TestClient):
        response = client.get("/books/abc")

        assert response.status_code == 422

    @pytest.mark.parametrize("book_id", [2**70, MAX_BOOK_ID + 1, 0, -1])
    def test_out_of_range_id_is_rejected(self, client: TestClient, book_id: int):
        assert client.get(f"/books/{book_id}").status_code == 422
        assert client.put(f"/books/{book_id}", json={"title": "X"}).status_code == 422
        assert client.delete(f"/books/{book_id}").status_code == 422

    def test_largest_id_is_not_found(self, client: TestClient):
        response = client.get(f"/books/{MAX_BOOK_ID}")

        assert response.status_code == 404


class TestUpdateBook:
    def test_update_missing_does_not_create(self, client: TestClient):
        response = client.put("/books/42", json={"title": "Ghost", "author": "Nobody"})

        assert response.status_code == 404
        assert client.get("/books").json() == []
        assert client.get("/books/42").status_code == 404

    def test_update_preserves_id_and_replaces_fields(self, client: TestClient):
        created = _create(client, "Dune", "Herbert")

        response = client.put(
            f"/books/{created['id']}",
            json={"id": 999, "title": "Children of Dune", "author": "F. Herbert"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"],
            "title": "Children of Dune",
            "author": "F. Herbert",
        }
        assert client.get(f"/books/{created['id']}").json()["title"] == "Children of Dune"

    def test_update_leaves_other_books_alone(self, client: TestClient):
        first = _create(client, "Dune", "Herbert")
        second = _create(client, "Emma", "Austen")

        client.put(f"/books/{first['id']}", json={"title": "Dune (rev)", "author": "Herbert"})

        assert client.get(f"/books/{second['id']}").json() == second


class TestDeleteBook:
    def test_delete_missing_is_noop(self, client: TestClient):
        _create(client, "Dune", "Herbert")

        response = client.delete("/books/999")

        assert response.status_code == 204
        assert len(client.get("/books").json()) == 1

    def test_delete_removes_only_that_book(self, client: TestClient):
        first = _create(client, "Dune", "Herbert")
        second = _create(client, "Emma", "Austen")

        client.delete(f"/books/{first['id']}")

        assert client.get("/books").json() == [second]


class TestConcurrentDelete:
    def test_update_of_book_deleted_mid_request_is_not_found(self, client: TestClient):
        created = _create(client, "Dune", "Herbert")

        with patch.object(
            BookRepository,
            "update",
            side_effect=ValueError(f"Book with id {created['id']} not found"),
        ):
            response = client.put(
                f"/books/{created['id']}", json={"title": "Dune (rev)", "author": "Herbert"}
            )

        assert response.status_code == 404
        assert response.json()["detail"] == "Book not found"
