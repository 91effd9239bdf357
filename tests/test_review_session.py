"""Tests for the API client and the review workflow built on it."""

import json
import uuid
from typing import Any

import httpx
import pytest

from cardforge.application.common.request_lifecycle import RequestState
from cardforge.client import ApiError, CardforgeClient, ReviewSession
from cardforge.domain.common.exceptions import InvalidTransitionError
from cardforge.domain.learning.services.suggestion_curation import CurationStatus
from cardforge.exceptions import ValidationError

BASE_URL = "https://cardforge.test"
GENERATION_ID = str(uuid.uuid4())
SOURCE_TEXT = "z" * 1200


def _generation_body(count: int = 3) -> dict[str, Any]:
    return {
        "generation_id": GENERATION_ID,
        "model": "test/model",
        "generated_count": count,
        "suggestions": [
            {"front": f"Q{i}", "back": f"A{i}", "source": "ai-full"} for i in range(count)
        ],
    }


class FakeApi:
    """Scripted API answering generate and bulk create requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.generate_response = httpx.Response(201, json=_generation_body())
        self.create_response: httpx.Response | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/v1/flashcards/generate":
            return self.generate_response
        if request.url.path == "/api/v1/flashcards" and request.method == "POST":
            if self.create_response is not None:
                return self.create_response
            items = json.loads(request.content)["flashcards"]
            data = [
                {**item, "id": i, "created_at": "2026-01-01T00:00:00Z"}
                for i, item in enumerate(items, start=1)
            ]
            return httpx.Response(201, json={"data": data, "failed": []})
        return httpx.Response(404, json={"detail": "Not Found"})

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def session(fake_api: FakeApi) -> ReviewSession:
    client = CardforgeClient(BASE_URL, token="t0ken", transport=httpx.MockTransport(fake_api))
    return ReviewSession(client)


class TestReviewSession:
    @pytest.mark.asyncio
    async def test_generate_starts_review(self, session: ReviewSession, fake_api: FakeApi) -> None:
        suggestions = await session.generate(SOURCE_TEXT)

        assert [s.front for s in suggestions] == ["Q0", "Q1", "Q2"]
        assert session.curation.statuses == [CurationStatus.PENDING] * 3
        assert str(session.generation_id) == GENERATION_ID
        assert session.generate_request.state is RequestState.SUCCESS
        assert fake_api.requests[0].headers["Authorization"] == "Bearer t0ken"
        assert not session.can_save

    @pytest.mark.asyncio
    async def test_short_text_is_rejected_before_any_request(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        with pytest.raises(ValidationError):
            await session.generate("z" * 999)

        assert fake_api.requests == []
        assert session.generate_request.state is RequestState.IDLE

    @pytest.mark.asyncio
    async def test_long_text_is_rejected_before_any_request(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        with pytest.raises(ValidationError):
            await session.generate("z" * 10001)

        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_generate_while_in_flight_is_refused(self, session: ReviewSession) -> None:
        session.generate_request.start()

        assert not session.can_generate
        with pytest.raises(InvalidTransitionError):
            await session.generate(SOURCE_TEXT)

    @pytest.mark.asyncio
    async def test_generation_failure_is_recorded(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        fake_api.generate_response = httpx.Response(
            500, json={"error": "Internal Server Error", "code": "AI_SERVICE_ERROR"}
        )

        with pytest.raises(ApiError) as exc_info:
            await session.generate(SOURCE_TEXT)

        assert exc_info.value.status_code == 500
        assert session.generate_request.state is RequestState.ERROR
        assert session.generate_request.error == "Internal Server Error"
        assert session.can_generate

    @pytest.mark.asyncio
    async def test_save_sends_curated_items_in_order(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        await session.generate(SOURCE_TEXT)
        session.curation.approve(2)
        session.curation.start_edit(0)
        session.curation.update_edit(back="Edited A0")
        session.curation.save_edit()
        session.curation.reject(1)

        body = await session.save_curated()

        assert fake_api.last_json() == {
            "flashcards": [
                {
                    "front": "Q0",
                    "back": "Edited A0",
                    "source": "ai-edited",
                    "generation_id": GENERATION_ID,
                },
                {"front": "Q2", "back": "A2", "source": "ai-full", "generation_id": GENERATION_ID},
            ]
        }
        assert len(body["data"]) == 2
        assert session.save_request.state is RequestState.SUCCESS

    @pytest.mark.asyncio
    async def test_save_with_nothing_eligible_is_refused(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        await session.generate(SOURCE_TEXT)
        session.curation.reject(0)

        with pytest.raises(InvalidTransitionError):
            await session.save_curated()
        assert len(fake_api.requests) == 1

    @pytest.mark.asyncio
    async def test_save_where_nothing_persisted_is_marked_failed(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        await session.generate(SOURCE_TEXT)
        session.curation.approve(0)
        fake_api.create_response = httpx.Response(
            422, json={"data": [], "failed": [{"index": 0, "error": "Failed to save"}]}
        )

        body = await session.save_curated()

        assert body["failed"][0]["index"] == 0
        assert session.save_request.state is RequestState.ERROR
        assert session.save_request.error == "Failed to save"

    @pytest.mark.asyncio
    async def test_save_answered_with_html_is_marked_failed(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        await session.generate(SOURCE_TEXT)
        session.curation.approve(0)
        fake_api.create_response = httpx.Response(
            422, text="<html><body>Bad gateway page</body></html>"
        )

        with pytest.raises(ApiError) as exc_info:
            await session.save_curated()

        assert exc_info.value.status_code == 422
        assert session.save_request.state is RequestState.ERROR
        assert session.can_save

    @pytest.mark.asyncio
    async def test_generation_body_missing_suggestions_is_marked_failed(
        self, session: ReviewSession, fake_api: FakeApi
    ) -> None:
        fake_api.generate_response = httpx.Response(201, json={"generation_id": GENERATION_ID})

        with pytest.raises(KeyError):
            await session.generate(SOURCE_TEXT)

        assert session.generate_request.state is RequestState.ERROR
        assert session.generation_id is None
        assert session.can_generate

    @pytest.mark.asyncio
    async def test_requested_count_is_sent(self, session: ReviewSession, fake_api: FakeApi) -> None:
        await session.generate(SOURCE_TEXT, num_cards=5)

        assert fake_api.last_json() == {"source_text": SOURCE_TEXT, "num_cards": 5}

    @pytest.mark.asyncio
    async def test_new_generation_resets_review(self, session: ReviewSession) -> None:
        await session.generate(SOURCE_TEXT)
        session.curation.approve(0)

        await session.generate(SOURCE_TEXT)

        assert session.curation.statuses == [CurationStatus.PENDING] * 3
        assert not session.can_save


class TestCardforgeClient:
    @pytest.mark.asyncio
    async def test_error_status_raises_api_error(self, fake_api: FakeApi) -> None:
        async with CardforgeClient(
            BASE_URL, token="t", transport=httpx.MockTransport(fake_api)
        ) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get_flashcard(42)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Not Found"
