"""API routes for flashcard management."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from cardforge.application.learning.use_cases.dtos import CreateFlashcardCommand
from cardforge.application.learning.use_cases.flashcards import (
    CreateFlashcardsUseCase,
    DeleteFlashcardUseCase,
    GetFlashcardUseCase,
    ListFlashcardsUseCase,
    UpdateFlashcardUseCase,
)
from cardforge.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from cardforge.core import container
from cardforge.domain.common.exceptions import DomainError
from cardforge.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from cardforge.exceptions import CardforgeError
from cardforge.infrastructure.common.di import inject_use_case
from cardforge.infrastructure.common.schemas import PaginatedResponse, PaginationMeta
from cardforge.infrastructure.identity.dependencies import CurrentOwner
from cardforge.infrastructure.learning.schemas import (
    FailedFlashcard,
    Flashcard,
    FlashcardDeleteResponse,
    FlashcardsCreateRequest,
    FlashcardsCreateResponse,
    FlashcardUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


def to_flashcard_schema(entity: FlashcardEntity) -> Flashcard:
    """Build the response schema from a domain entity, leaving out the owner."""
    return Flashcard(
        id=entity.id.value,
        front=entity.front,
        back=entity.back,
        source=entity.source.value,
        generation_id=entity.generation_id.value if entity.generation_id else None,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


@router.post(
    "",
    response_model=FlashcardsCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": FlashcardsCreateResponse, "description": "No flashcard saved"}},
)
def create_flashcards(
    payload: FlashcardsCreateRequest,
    response: Response,
    owner_id: CurrentOwner,
    use_case: CreateFlashcardsUseCase = Depends(
        inject_use_case(container.create_flashcards_use_case)
    ),
) -> FlashcardsCreateResponse:
    """
    Save a batch of flashcards.

    Each item succeeds or fails on its own. Returns 201 when at least one
    flashcard was saved and 422 with the same body when none was.
    """
    commands = [
        CreateFlashcardCommand(
            front=item.front,
            back=item.back,
            source=item.source,
            generation_id=item.generation_id,
        )
        for item in payload.flashcards
    ]
    result = use_case.create_flashcards(owner_id, commands)

    if not result.has_created:
        response.status_code = status.HTTP_422_UNPROCESSABLE_CONTENT

    return FlashcardsCreateResponse(
        data=[to_flashcard_schema(fc) for fc in result.created],
        failed=[FailedFlashcard(index=f.index, error=f.error) for f in result.failed],
    )


@router.get(
    "",
    response_model=PaginatedResponse[Flashcard],
    status_code=status.HTTP_200_OK,
)
def list_flashcards(
    owner_id: CurrentOwner,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    sort_by: Literal["created_at", "updated_at", "front", "back"] = "created_at",
    order: Literal["asc", "desc"] = "desc",
    use_case: ListFlashcardsUseCase = Depends(
        inject_use_case(container.list_flashcards_use_case)
    ),
) -> PaginatedResponse[Flashcard]:
    """List the caller's flashcards."""
    result = use_case.list_flashcards(
        owner_id, page=page, page_size=limit, sort_by=sort_by, order=order
    )
    return PaginatedResponse[Flashcard](
        data=[to_flashcard_schema(fc) for fc in result.items],
        pagination=PaginationMeta(page=result.page, limit=result.page_size, total=result.total),
    )


@router.get(
    "/{flashcard_id}",
    response_model=Flashcard,
    status_code=status.HTTP_200_OK,
)
def get_flashcard(
    flashcard_id: int,
    owner_id: CurrentOwner,
    use_case: GetFlashcardUseCase = Depends(inject_use_case(container.get_flashcard_use_case)),
) -> Flashcard:
    """Get one flashcard."""
    return to_flashcard_schema(use_case.get_flashcard(flashcard_id, owner_id))


@router.put(
    "/{flashcard_id}",
    response_model=Flashcard,
    status_code=status.HTTP_200_OK,
)
def update_flashcard(
    flashcard_id: int,
    payload: FlashcardUpdateRequest,
    owner_id: CurrentOwner,
    use_case: UpdateFlashcardUseCase = Depends(
        inject_use_case(container.update_flashcard_use_case)
    ),
) -> Flashcard:
    """
    Update a flashcard's front and/or back.

    Args:
        flashcard_id: ID of the flashcard to update
        payload: New front and/or back
        use_case: UpdateFlashcardUseCase injected via dependency container

    Returns:
        Updated flashcard

    Raises:
        HTTPException: If flashcard not found or update fails
    """
    try:
        flashcard_entity = use_case.update_flashcard(
            flashcard_id=flashcard_id,
            owner_id=owner_id,
            front=payload.front,
            back=payload.back,
        )
        return to_flashcard_schema(flashcard_entity)
    except (CardforgeError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{flashcard_id}",
    response_model=FlashcardDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_flashcard(
    flashcard_id: int,
    owner_id: CurrentOwner,
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> FlashcardDeleteResponse:
    """
    Delete a flashcard.

    Raises:
        HTTPException: If flashcard not found or deletion fails
    """
    try:
        use_case.delete_flashcard(flashcard_id=flashcard_id, owner_id=owner_id)
        return FlashcardDeleteResponse(success=True, message="Flashcard deleted successfully")
    except (CardforgeError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
