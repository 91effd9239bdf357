"""Tests for flashcards API endpoints."""

import uuid
from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from cardforge import models
from tests.conftest import create_test_flashcard, create_test_generation

FLASHCARDS_URL = "/api/v1/flashcards"


class TestCreateFlashcards:
    """Test suite for POST /flashcards endpoint."""

    def test_create_manual_flashcards(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        response = client.post(
            FLASHCARDS_URL,
            json={
                "flashcards": [
                    {"front": "Capital of France?", "back": "Paris", "source": "manual"},
                    {"front": "2 + 2?", "back": "4", "source": "manual", "generation_id": None},
                ]
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["failed"] == []
        assert [fc["front"] for fc in data["data"]] == ["Capital of France?", "2 + 2?"]
        first = data["data"][0]
        assert first["source"] == "manual"
        assert first["generation_id"] is None
        assert "owner_id" not in first
        assert first["id"] > 0
        assert first["created_at"] and first["updated_at"]

        assert db_session.query(models.Flashcard).filter_by(owner_id=owner_id).count() == 2

    def test_partial_failure_returns_created_and_failed_items(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        """Item at index 1 has an empty front; the other two are saved."""
        generation = create_test_generation(db_session, owner_id)
        gen_id = str(generation.id)

        response = client.post(
            FLASHCARDS_URL,
            json={
                "flashcards": [
                    {"front": "Q1", "back": "A1", "source": "ai-full", "generation_id": gen_id},
                    {"front": "", "back": "A2", "source": "ai-full", "generation_id": gen_id},
                    {"front": "Q3", "back": "A3", "source": "ai-edited", "generation_id": gen_id},
                ]
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert [fc["front"] for fc in data["data"]] == ["Q1", "Q3"]
        assert len(data["failed"]) == 1
        assert data["failed"][0]["index"] == 1
        assert "Front" in data["failed"][0]["error"]

    def test_accepted_counters_are_incremented(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        generation = create_test_generation(db_session, owner_id)
        gen_id = str(generation.id)

        response = client.post(
            FLASHCARDS_URL,
            json={
                "flashcards": [
                    {"front": "Q1", "back": "A1", "source": "ai-full", "generation_id": gen_id},
                    {"front": "Q2", "back": "A2", "source": "ai-full", "generation_id": gen_id},
                    {"front": "Q3", "back": "A3", "source": "ai-edited", "generation_id": gen_id},
                ]
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        db_session.expire_all()
        refreshed = db_session.get(models.Generation, generation.id)
        assert refreshed is not None
        assert refreshed.accepted_unedited_count == 2
        assert refreshed.accepted_edited_count == 1

    def test_too_long_fields_are_reported_per_item(
        self, client: TestClient, db_session: Session
    ) -> None:
        response = client.post(
            FLASHCARDS_URL,
            json={
                "flashcards": [
                    {"front": "x" * 201, "back": "ok", "source": "manual"},
                    {"front": "ok", "back": "y" * 501, "source": "manual"},
                    {"front": "x" * 200, "back": "y" * 500, "source": "manual"},
                ]
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert len(data["data"]) == 1
        assert [f["index"] for f in data["failed"]] == [0, 1]
        assert "200" in data["failed"][0]["error"]
        assert "500" in data["failed"][1]["error"]

    def test_total_failure_returns_422_with_same_shape(
        self, client: TestClient, db_session: Session
    ) -> None:
        response = client.post(
            FLASHCARDS_URL,
            json={"flashcards": [{"front": "", "back": "A", "source": "manual"}]},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        data = response.json()
        assert data["data"] == []
        assert data["failed"][0]["index"] == 0
        assert db_session.query(models.Flashcard).count() == 0

    def test_single_space_front_is_saved(
        self, client: TestClient, db_session: Session
    ) -> None:
        response = client.post(
            FLASHCARDS_URL,
            json={"flashcards": [{"front": " ", "back": "A", "source": "manual"}]},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["data"][0]["front"] == " "
        assert db_session.query(models.Flashcard).count() == 1

    def test_generation_of_another_owner_is_rejected(
        self,
        client: TestClient,
        db_session: Session,
        other_owner_id: uuid.UUID,
    ) -> None:
        foreign = create_test_generation(db_session, other_owner_id)

        response = client.post(
            FLASHCARDS_URL,
            json={
                "flashcards": [
                    {
                        "front": "Q",
                        "back": "A",
                        "source": "ai-full",
                        "generation_id": str(foreign.id),
                    },
                    {"front": "Manual", "back": "Card", "source": "manual"},
                ]
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert [fc["front"] for fc in data["data"]] == ["Manual"]
        assert data["failed"][0]["index"] == 0
        assert "not found" in data["failed"][0]["error"]
        db_session.expire_all()
        assert db_session.get(models.Generation, foreign.id).accepted_unedited_count == 0

    def test_batch_insert_failure_marks_every_item_failed(
        self, client: TestClient, db_session: Session
    ) -> None:
        with patch.object(
            Session, "commit", side_effect=OperationalError("INSERT", {}, Exception("gone"))
        ):
            response = client.post(
                FLASHCARDS_URL,
                json={
                    "flashcards": [
                        {"front": "", "back": "A", "source": "manual"},
                        {"front": "Q2", "back": "A2", "source": "manual"},
                        {"front": "Q3", "back": "A3", "source": "manual"},
                    ]
                },
            )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        data = response.json()
        assert data["data"] == []
        assert [f["index"] for f in data["failed"]] == [0, 1, 2]
        assert data["failed"][1]["error"] == data["failed"][2]["error"]
        assert db_session.query(models.Flashcard).count() == 0

    def test_manual_with_generation_id_is_rejected_at_boundary(self, client: TestClient) -> None:
        response = client.post(
            FLASHCARDS_URL,
            json={
                "flashcards": [
                    {
                        "front": "Q",
                        "back": "A",
                        "source": "manual",
                        "generation_id": str(uuid.uuid4()),
                    }
                ]
            },
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_ai_source_without_generation_id_is_rejected_at_boundary(
        self, client: TestClient
    ) -> None:
        response = client.post(
            FLASHCARDS_URL,
            json={"flashcards": [{"front": "Q", "back": "A", "source": "ai-full"}]},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_unknown_source_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            FLASHCARDS_URL,
            json={"flashcards": [{"front": "Q", "back": "A", "source": "imported"}]},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_empty_batch_is_rejected(self, client: TestClient) -> None:
        response = client.post(FLASHCARDS_URL, json={"flashcards": []})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_requires_authentication(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post(
            FLASHCARDS_URL,
            json={"flashcards": [{"front": "Q", "back": "A", "source": "manual"}]},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestListFlashcards:
    """Test suite for GET /flashcards endpoint."""

    def test_list_is_scoped_to_owner_and_paginated(
        self,
        client: TestClient,
        db_session: Session,
        owner_id: uuid.UUID,
        other_owner_id: uuid.UUID,
    ) -> None:
        for i in range(3):
            create_test_flashcard(db_session, owner_id, front=f"Mine {i}")
        create_test_flashcard(db_session, other_owner_id, front="Theirs")

        response = client.get(FLASHCARDS_URL, params={"page": 1, "limit": 2})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["pagination"] == {"page": 1, "limit": 2, "total": 3}
        assert len(data["data"]) == 2
        assert all(fc["front"].startswith("Mine") for fc in data["data"])

    def test_sort_by_front_ascending(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        for front in ("banana", "apple", "cherry"):
            create_test_flashcard(db_session, owner_id, front=front)

        response = client.get(FLASHCARDS_URL, params={"sort_by": "front", "order": "asc"})

        assert [fc["front"] for fc in response.json()["data"]] == ["apple", "banana", "cherry"]

    def test_invalid_sort_column_is_rejected(self, client: TestClient) -> None:
        response = client.get(FLASHCARDS_URL, params={"sort_by": "owner_id"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_limit_above_maximum_is_rejected(self, client: TestClient) -> None:
        response = client.get(FLASHCARDS_URL, params={"limit": 101})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestGetFlashcard:
    """Test suite for GET /flashcards/:id endpoint."""

    def test_get_own_flashcard(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        flashcard = create_test_flashcard(db_session, owner_id, front="Q", back="A")

        response = client.get(f"{FLASHCARDS_URL}/{flashcard.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["front"] == "Q"

    def test_flashcard_of_another_owner_is_not_found(
        self, client: TestClient, db_session: Session, other_owner_id: uuid.UUID
    ) -> None:
        flashcard = create_test_flashcard(db_session, other_owner_id)

        response = client.get(f"{FLASHCARDS_URL}/{flashcard.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"].lower()


class TestUpdateFlashcard:
    """Test suite for PUT /flashcards/:id endpoint."""

    def test_update_ai_full_flashcard_becomes_ai_edited(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        generation = create_test_generation(db_session, owner_id)
        flashcard = create_test_flashcard(
            db_session, owner_id, source="ai-full", generation_id=generation.id
        )

        response = client.put(f"{FLASHCARDS_URL}/{flashcard.id}", json={"back": "Better answer"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["back"] == "Better answer"
        assert data["front"] == "Question?"
        assert data["source"] == "ai-edited"
        assert data["generation_id"] == str(generation.id)

    def test_update_manual_flashcard_keeps_source(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        flashcard = create_test_flashcard(db_session, owner_id)

        response = client.put(f"{FLASHCARDS_URL}/{flashcard.id}", json={"front": "New?"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["source"] == "manual"

    def test_update_without_fields_is_rejected(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        flashcard = create_test_flashcard(db_session, owner_id)

        response = client.put(f"{FLASHCARDS_URL}/{flashcard.id}", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_too_long_front_is_rejected(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        flashcard = create_test_flashcard(db_session, owner_id)

        response = client.put(f"{FLASHCARDS_URL}/{flashcard.id}", json={"front": "x" * 201})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_update_missing_flashcard(self, client: TestClient) -> None:
        response = client.put(f"{FLASHCARDS_URL}/99999", json={"front": "Q"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteFlashcard:
    """Test suite for DELETE /flashcards/:id endpoint."""

    def test_delete_flashcard(
        self, client: TestClient, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        flashcard = create_test_flashcard(db_session, owner_id)
        flashcard_id = flashcard.id

        response = client.delete(f"{FLASHCARDS_URL}/{flashcard_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        db_session.expire_all()
        assert db_session.get(models.Flashcard, flashcard_id) is None

    def test_delete_flashcard_of_another_owner(
        self, client: TestClient, db_session: Session, other_owner_id: uuid.UUID
    ) -> None:
        flashcard = create_test_flashcard(db_session, other_owner_id)

        response = client.delete(f"{FLASHCARDS_URL}/{flashcard.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.Flashcard).count() == 1
