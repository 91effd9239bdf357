"""API routes for AI flashcard generation and the generation ledger."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from cardforge.application.learning.use_cases.exceptions import (
    EmptyResultError,
    GenerationError,
    GenerationErrorCode,
)
from cardforge.application.learning.use_cases.generations import (
    GenerateFlashcardsUseCase,
    ListGenerationErrorLogsUseCase,
    ListGenerationsUseCase,
)
from cardforge.config import get_settings
from cardforge.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from cardforge.core import container
from cardforge.dependencies import require_ai_enabled
from cardforge.infrastructure.common.di import inject_use_case
from cardforge.infrastructure.common.rate_limit import limiter
from cardforge.infrastructure.common.schemas import (
    ErrorResponse,
    PaginatedResponse,
    PaginationMeta,
)
from cardforge.infrastructure.identity.dependencies import CurrentOwner
from cardforge.infrastructure.learning.schemas import (
    FlashcardSuggestionItem,
    GenerateFlashcardsRequest,
    GenerateFlashcardsResponse,
    GenerationErrorLogItem,
    GenerationSummary,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(tags=["generations"])


def _error_response(status_code: int, error: str, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, code=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/flashcards/generate",
    response_model=GenerateFlashcardsResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_ai_enabled)],
    responses={
        422: {"model": ErrorResponse, "description": "Invalid input or empty result"},
        500: {"model": ErrorResponse, "description": "Generation failed"},
    },
)
@limiter.limit(settings.GENERATION_RATE_LIMIT)  # type: ignore[misc]
async def generate_flashcards(
    request: Request,
    payload: GenerateFlashcardsRequest,
    owner_id: CurrentOwner,
    use_case: GenerateFlashcardsUseCase = Depends(
        inject_use_case(container.generate_flashcards_use_case)
    ),
) -> GenerateFlashcardsResponse | JSONResponse:
    """
    Generate flashcard suggestions from source text.

    Nothing is saved as flashcards; the suggestions are reviewed by the user
    and then sent to POST /flashcards.
    """
    try:
        result = await use_case.generate(owner_id, payload.source_text, payload.num_cards)
    except EmptyResultError as e:
        return _error_response(
            status.HTTP_422_UNPROCESSABLE_CONTENT,
            "Generation produced no results",
            e.code,
            e.message,
        )
    except GenerationError as e:
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", e.code, e.message
        )
    except Exception:
        logger.error("Unexpected error while generating flashcards", exc_info=True)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            GenerationErrorCode.UNKNOWN_ERROR,
            "An unexpected error occurred. Please try again later.",
        )

    return GenerateFlashcardsResponse(
        generation_id=result.generation_id.value,
        model=result.model,
        suggestions=[
            FlashcardSuggestionItem(front=s.front, back=s.back, source=s.source)
            for s in result.suggestions
        ],
        generated_count=result.generated_count,
    )


@router.get(
    "/generations",
    response_model=PaginatedResponse[GenerationSummary],
    status_code=status.HTTP_200_OK,
)
def list_generations(
    owner_id: CurrentOwner,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    use_case: ListGenerationsUseCase = Depends(
        inject_use_case(container.list_generations_use_case)
    ),
) -> PaginatedResponse[GenerationSummary]:
    """List the caller's generations, newest first."""
    result = use_case.list_generations(owner_id, page=page, page_size=limit)
    return PaginatedResponse[GenerationSummary](
        data=[
            GenerationSummary(
                id=g.id.value,
                model=g.model,
                generated_count=g.generated_count,
                accepted_edited_count=g.accepted_edited_count,
                accepted_unedited_count=g.accepted_unedited_count,
                source_text_length=g.source_text_length,
                generation_duration_ms=g.generation_duration_ms,
                created_at=g.created_at,
            )
            for g in result.items
        ],
        pagination=PaginationMeta(page=result.page, limit=result.page_size, total=result.total),
    )


@router.get(
    "/generation-error-logs",
    response_model=PaginatedResponse[GenerationErrorLogItem],
    status_code=status.HTTP_200_OK,
)
def list_generation_error_logs(
    owner_id: CurrentOwner,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    use_case: ListGenerationErrorLogsUseCase = Depends(
        inject_use_case(container.list_generation_error_logs_use_case)
    ),
) -> PaginatedResponse[GenerationErrorLogItem]:
    """List the caller's failed generation attempts, newest first."""
    result = use_case.list_error_logs(owner_id, page=page, page_size=limit)
    return PaginatedResponse[GenerationErrorLogItem](
        data=[
            GenerationErrorLogItem(
                id=log.id.value,
                model=log.model,
                error_code=log.error_code,
                error_message=log.error_message,
                source_text_length=log.source_text_length,
                created_at=log.created_at,
            )
            for log in result.items
        ],
        pagination=PaginationMeta(page=result.page, limit=result.page_size, total=result.total),
    )
