"""cardforge REST API client and the review workflow that runs on top of it."""

from typing import Any
from uuid import UUID

import httpx
import structlog

from cardforge.application.common.request_lifecycle import RequestLifecycle
from cardforge.constants import SOURCE_TEXT_MAX_LENGTH, SOURCE_TEXT_MIN_LENGTH
from cardforge.domain.common.exceptions import InvalidTransitionError
from cardforge.domain.learning.entities.flashcard_suggestion import FlashcardSuggestion
from cardforge.domain.learning.services.suggestion_curation import SuggestionCuration
from cardforge.exceptions import CardforgeError, ValidationError

logger = structlog.get_logger(__name__)


class ApiError(CardforgeError):
    """The API answered with an error status."""

    def __init__(self, status_code: int, body: Any) -> None:
        self.body = body
        super().__init__(_error_message(status_code, body), status_code=status_code)


def _error_message(status_code: int, body: Any) -> str:
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            if isinstance(body.get(key), str):
                return body[key]
    return f"Request failed with HTTP {status_code}"


def validate_source_text(source_text: str) -> None:
    """
    Check the source text length before anything is sent.

    Raises:
        ValidationError: If the length is outside the accepted range
    """
    length = len(source_text)
    if length < SOURCE_TEXT_MIN_LENGTH:
        raise ValidationError(
            f"Source text must be at least {SOURCE_TEXT_MIN_LENGTH} characters "
            f"(got {length})",
            status_code=422,
        )
    if length > SOURCE_TEXT_MAX_LENGTH:
        raise ValidationError(
            f"Source text must be at most {SOURCE_TEXT_MAX_LENGTH} characters "
            f"(got {length})",
            status_code=422,
        )


class CardforgeClient:
    """HTTP client for the cardforge REST API.

    Sends the bearer token issued by the identity provider with every call.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Authorization": f"Bearer {token}"},
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "CardforgeClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        accept: tuple[int, ...] = (),
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request; statuses other than 2xx and `accept` raise ApiError."""
        response = await self._client.request(method, path, **kwargs)
        if response.is_success or response.status_code in accept:
            return response
        try:
            body = response.json()
        except ValueError:
            body = response.text
        logger.warning("api_request_failed", path=path, status_code=response.status_code)
        raise ApiError(response.status_code, body)

    # --- Generation endpoints ---

    async def generate_flashcards(self, source_text: str, num_cards: int | None = None) -> dict:
        """Request suggestions for a source text. The length is checked locally first."""
        validate_source_text(source_text)
        payload: dict[str, Any] = {"source_text": source_text}
        if num_cards is not None:
            payload["num_cards"] = num_cards
        response = await self._request("POST", "/api/v1/flashcards/generate", json=payload)
        return response.json()

    async def list_generations(self, page: int = 1, limit: int = 10) -> dict:
        response = await self._request(
            "GET", "/api/v1/generations", params={"page": page, "limit": limit}
        )
        return response.json()

    # --- Flashcard endpoints ---

    async def create_flashcards(self, flashcards: list[dict[str, Any]]) -> dict:
        """Save a batch; the 422 'nothing saved' answer is returned, not raised."""
        response = await self._request(
            "POST", "/api/v1/flashcards", accept=(422,), json={"flashcards": flashcards}
        )
        try:
            body = response.json()
        except ValueError:
            raise ApiError(response.status_code, response.text) from None
        if response.status_code == 422 and not (isinstance(body, dict) and "failed" in body):
            raise ApiError(response.status_code, body)
        return body

    async def list_flashcards(
        self,
        page: int = 1,
        limit: int = 10,
        sort_by: str = "created_at",
        order: str = "desc",
    ) -> dict:
        params: dict[str, str | int] = {
            "page": page,
            "limit": limit,
            "sort_by": sort_by,
            "order": order,
        }
        response = await self._request("GET", "/api/v1/flashcards", params=params)
        return response.json()

    async def get_flashcard(self, flashcard_id: int) -> dict:
        response = await self._request("GET", f"/api/v1/flashcards/{flashcard_id}")
        return response.json()

    async def update_flashcard(
        self, flashcard_id: int, front: str | None = None, back: str | None = None
    ) -> dict:
        payload = {
            key: value for key, value in (("front", front), ("back", back)) if value is not None
        }
        response = await self._request("PUT", f"/api/v1/flashcards/{flashcard_id}", json=payload)
        return response.json()

    async def delete_flashcard(self, flashcard_id: int) -> dict:
        response = await self._request("DELETE", f"/api/v1/flashcards/{flashcard_id}")
        return response.json()


class ReviewSession:
    """
    One user's generate, review and save workflow.

    At most one generation and one save are in flight at a time; a second
    request while one is outstanding raises InvalidTransitionError.
    """

    def __init__(self, client: CardforgeClient) -> None:
        self.client = client
        self.curation = SuggestionCuration()
        self.generate_request: RequestLifecycle[dict] = RequestLifecycle("generation")
        self.save_request: RequestLifecycle[dict] = RequestLifecycle("save")
        self.generation_id: UUID | None = None

    @property
    def can_generate(self) -> bool:
        return self.generate_request.can_start and not self.save_request.in_flight

    @property
    def can_save(self) -> bool:
        return (
            self.curation.can_save
            and self.generation_id is not None
            and self.save_request.can_start
            and not self.generate_request.in_flight
        )

    async def generate(
        self, source_text: str, num_cards: int | None = None
    ) -> list[FlashcardSuggestion]:
        """
        Generate suggestions and start a fresh review of them.

        Raises:
            ValidationError: If the source text length is out of range (no request is sent)
            InvalidTransitionError: If a generation or save is already in flight
            ApiError: If the API rejected the request
        """
        validate_source_text(source_text)
        if self.save_request.in_flight:
            raise InvalidTransitionError("start generation", "saving")
        self.generate_request.start()
        try:
            body = await self.client.generate_flashcards(source_text, num_cards)
            suggestions = [
                FlashcardSuggestion(front=item["front"], back=item["back"])
                for item in body["suggestions"]
            ]
            generation_id = UUID(body["generation_id"])
        except Exception as e:
            self.generate_request.fail(str(e) or type(e).__name__)
            raise

        self.generation_id = generation_id
        self.curation.reset(suggestions)
        self.save_request.reset()
        self.generate_request.succeed(body)
        logger.info(
            "review_session_generated",
            generation_id=str(self.generation_id),
            suggestion_count=len(suggestions),
        )
        return suggestions

    def save_payload(self) -> list[dict[str, Any]]:
        """Approved and edited suggestions as bulk create items, in suggestion order."""
        if self.generation_id is None:
            return []
        return [
            {
                "front": card.front,
                "back": card.back,
                "source": card.source.value,
                "generation_id": str(self.generation_id),
            }
            for card in self.curation.curated_flashcards()
        ]

    async def save_curated(self) -> dict:
        """
        Save the approved and edited suggestions.

        Returns the API result with `data` and `failed`. The save is marked
        failed when nothing was persisted.

        Raises:
            InvalidTransitionError: If nothing is eligible or a request is in flight
            ApiError: If the API rejected the request
        """
        if not self.curation.can_save or self.generation_id is None:
            raise InvalidTransitionError("save", "nothing approved or edited")
        if self.generate_request.in_flight:
            raise InvalidTransitionError("save", "generating")
        self.save_request.start()
        try:
            body = await self.client.create_flashcards(self.save_payload())
            saved = bool(body.get("data"))
            errors = "; ".join(item["error"] for item in body.get("failed", []))
        except Exception as e:
            self.save_request.fail(str(e) or type(e).__name__)
            raise

        if not saved:
            self.save_request.fail(errors or "No flashcards were saved")
        else:
            self.save_request.succeed(body)
        return body
