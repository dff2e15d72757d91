"""
Tests for Authors API Endpoints

Tests for /api/v1/authors endpoints.
"""

import uuid

from fastapi import status

from library_api.utils.pagination import MAX_PAGE

API = "/api/v1"
MISSING_ID = "8f14e45f-ceea-4e7a-9b1c-2d3e4f5a6b7c"


class TestCreateAuthor:
    """Tests for POST /api/v1/authors endpoint."""

    def test_create_author_full(self, client):
        """Test creating an author with all fields."""
        author_data = {
            "firstName": "Test",
            "lastName": "Author",
            "bio": "A test author for E2E testing",
            "birthDate": "1980-01-01",
        }

        response = client.post(f"{API}/authors", json=author_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["firstName"] == "Test"
        assert data["lastName"] == "Author"
        assert data["bio"] == "A test author for E2E testing"
        assert data["birthDate"] == "1980-01-01"
        assert uuid.UUID(data["id"])
        assert data["createdAt"] == data["updatedAt"]

    def test_create_author_minimal(self, client):
        """Test creating an author with only required fields."""
        response = client.post(
            f"{API}/authors",
            json={"firstName": "Jane", "lastName": "Austen"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["bio"] is None
        assert data["birthDate"] is None

    def test_create_author_empty_first_name(self, client):
        """Test that an empty first name is rejected."""
        response = client.post(
            f"{API}/authors",
            json={"firstName": "", "lastName": "Author"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_author_whitespace_last_name(self, client):
        """Test that a whitespace-only last name is rejected."""
        response = client.post(
            f"{API}/authors",
            json={"firstName": "Test", "lastName": "   "},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_author_missing_last_name(self, client):
        """Test that last name is required."""
        response = client.post(f"{API}/authors", json={"firstName": "Test"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestListAuthors:
    """Tests for GET /api/v1/authors endpoint."""

    def test_list_authors_empty(self, client):
        """Test listing authors when database is empty."""
        response = client.get(f"{API}/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "data": [],
            "meta": {"total": 0, "page": 1, "limit": 10, "totalPages": 0},
        }

    def test_list_authors_with_data(self, client, sample_author):
        """Test listing authors returns expected data."""
        response = client.get(f"{API}/authors")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["meta"]["total"] == 1
        assert data["data"][0]["id"] == str(sample_author.id)
        assert data["data"][0]["firstName"] == "George"

    def test_list_authors_filter_by_first_name(self, client, sample_author, second_author):
        """Test the firstName filter is a case-insensitive substring match."""
        response = client.get(f"{API}/authors", params={"firstName": "GEO"})

        data = response.json()
        assert data["meta"]["total"] == 1
        assert data["data"][0]["lastName"] == "Orwell"

    def test_list_authors_filter_by_last_name(self, client, sample_author, second_author):
        """Test the lastName filter."""
        response = client.get(f"{API}/authors", params={"lastName": "ust"})

        data = response.json()
        assert [a["firstName"] for a in data["data"]] == ["Jane"]

    def test_list_authors_pagination(self, client, sample_author, second_author):
        """Test limit restricts the window but not the total."""
        response = client.get(f"{API}/authors", params={"page": 2, "limit": 1})

        data = response.json()
        assert len(data["data"]) == 1
        assert data["meta"] == {"total": 2, "page": 2, "limit": 1, "totalPages": 2}

    def test_list_authors_negative_page_rejected(self, client):
        """Test that a negative page is malformed input."""
        response = client.get(f"{API}/authors", params={"page": -1})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_list_authors_oversized_page_rejected(self, client):
        """Test a page number beyond the supported range is a client error."""
        response = client.get(f"{API}/authors", params={"page": "99999999999999999999"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_list_authors_last_allowed_page(self, client, sample_author):
        """Test the largest allowed page is an empty window, not an error."""
        response = client.get(f"{API}/authors", params={"page": MAX_PAGE})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == []
        assert response.json()["meta"]["total"] == 1

    def test_list_authors_zero_limit_uses_default(self, client, sample_author):
        """Test that limit=0 falls back to the default page size."""
        response = client.get(f"{API}/authors", params={"limit": 0})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["meta"]["limit"] == 10
        assert response.json()["meta"]["totalPages"] == 1


class TestGetAuthor:
    """Tests for GET /api/v1/authors/{author_id} endpoint."""

    def test_get_author_success(self, client, sample_author):
        """Test getting an author by ID."""
        response = client.get(f"{API}/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == str(sample_author.id)
        assert data["firstName"] == "George"
        assert data["birthDate"] == "1903-06-25"
        assert "createdAt" in data

    def test_get_author_not_found(self, client):
        """Test getting a non-existent author returns 404."""
        response = client.get(f"{API}/authors/{MISSING_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["error"] == "not_found"
        assert MISSING_ID in body["message"]

    def test_get_author_invalid_uuid(self, client):
        """Test a malformed ID is a bad request, not a 404."""
        response = client.get(f"{API}/authors/invalid-uuid")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "validation_error"


class TestUpdateAuthor:
    """Tests for PATCH /api/v1/authors/{author_id} endpoint."""

    def test_update_author_name(self, client, sample_author):
        """Test updating only the first name."""
        response = client.patch(
            f"{API}/authors/{sample_author.id}",
            json={"firstName": "Eric"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["firstName"] == "Eric"
        assert data["lastName"] == "Orwell"
        assert data["bio"] == "English novelist and essayist, journalist and critic."

    def test_update_author_clear_bio(self, client, sample_author):
        """Test an explicit null is applied, unlike an omitted field."""
        response = client.patch(
            f"{API}/authors/{sample_author.id}",
            json={"bio": None},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["bio"] is None
        assert response.json()["birthDate"] == "1903-06-25"

    def test_update_author_empty_body(self, client, sample_author):
        """Test an empty update returns the record unchanged."""
        before = client.get(f"{API}/authors/{sample_author.id}").json()

        response = client.patch(f"{API}/authors/{sample_author.id}", json={})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == before

    def test_update_author_not_found(self, client):
        """Test updating a non-existent author returns 404."""
        response = client.patch(
            f"{API}/authors/{MISSING_ID}",
            json={"firstName": "Updated"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_author_invalid_uuid(self, client):
        """Test updating with a malformed ID returns 400."""
        response = client.patch(
            f"{API}/authors/invalid-uuid",
            json={"firstName": "Updated"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_author_null_first_name(self, client, sample_author):
        """Test the datastore's NOT NULL rejection surfaces as 400."""
        response = client.patch(
            f"{API}/authors/{sample_author.id}",
            json={"firstName": None},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error"] == "persistence_error"
        assert body["message"].startswith("Failed to update author")


class TestDeleteAuthor:
    """Tests for DELETE /api/v1/authors/{author_id} endpoint."""

    def test_delete_author_success(self, client, sample_author):
        """Test deleting an author successfully."""
        author_id = str(sample_author.id)

        response = client.delete(f"{API}/authors/{author_id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        get_response = client.get(f"{API}/authors/{author_id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_not_found(self, client):
        """Test deleting a non-existent author returns 404."""
        response = client.delete(f"{API}/authors/{MISSING_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_invalid_uuid(self, client):
        """Test deleting with a malformed ID returns 400."""
        response = client.delete(f"{API}/authors/invalid-uuid")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_author_with_books(self, client, sample_book, sample_author):
        """Test an author with books can't be deleted and keeps its books."""
        response = client.delete(f"{API}/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "persistence_error"

        book_response = client.get(f"{API}/books/{sample_book.id}")
        assert book_response.status_code == status.HTTP_200_OK
