"""Application service that turns source text into flashcard suggestions."""

from typing import Annotated, Any

import structlog
from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter

from cardforge.application.learning.protocols.completion_client import (
    ChatMessage,
    CompletionClientProtocol,
)
from cardforge.application.learning.use_cases.dtos.generation_dtos import GeneratedFlashcards
from cardforge.application.learning.use_cases.exceptions import (
    EmptyResultError,
    GenerationFailed,
)
from cardforge.domain.common.value_objects.ids import GenerationId
from cardforge.domain.learning.entities.flashcard_suggestion import FlashcardSuggestion
from cardforge.infrastructure.ai.exceptions import CompletionError

logger = structlog.get_logger(__name__)

SCHEMA_NAME = "flashcard_list_generator"


class FlashcardDraft(BaseModel):
    """
    One flashcard as the model is asked to return it.

    The request schema still forbids extra keys. Keys the model adds anyway
    are dropped on validation.
    """

    model_config = ConfigDict(extra="ignore", json_schema_extra={"additionalProperties": False})

    front: str
    back: str


def _null_as_empty(value: Any) -> Any:
    return [] if value is None else value


FLASHCARD_LIST: TypeAdapter[list[FlashcardDraft]] = TypeAdapter(
    Annotated[list[FlashcardDraft], BeforeValidator(_null_as_empty)]
)


def build_system_prompt(count: int) -> str:
    """Instructions sent ahead of the source text. Same count, same prompt."""
    return f"""
Your task is to create {count} flashcards from the text provided by the user.

IMPORTANT: You must return a valid JSON array containing exactly {count} flashcard objects with the following structure:
[
  {{
    "front": "Question text goes here?",
    "back": "Answer text goes here"
  }},
  ... (more flashcards)
]

Guidelines:
- Create exactly {count} flashcards
- Focus on the most important concepts from the text
- Write questions on the 'front' and answers on the 'back'
- Keep both front and back concise but informative
- Ensure your response is a valid JSON array that can be parsed
- Do not include any text outside the JSON array
""".strip()


class FlashcardGenerationService:
    """Builds the prompt, calls the model and converts its answer into suggestions."""

    def __init__(
        self,
        completion_client: CompletionClientProtocol,
        model: str,
        flashcard_count: int = 10,
        temperature: float | None = 0.5,
        max_tokens: int | None = None,
    ) -> None:
        self.completion_client = completion_client
        self.model = model
        self.flashcard_count = flashcard_count
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(self, source_text: str, count: int | None = None) -> GeneratedFlashcards:
        """
        Generate flashcard suggestions for a source text.

        The caller validates the source text length. Nothing is persisted here.

        Args:
            source_text: Text to generate flashcards from
            count: Number of flashcards to ask for, the configured count when omitted

        Returns:
            Suggestions tagged 'ai-full' with a fresh generation id

        Raises:
            GenerationFailed: If the completion call or its output failed
            EmptyResultError: If the model returned an empty list
        """
        if count is None:
            count = self.flashcard_count
        messages = [
            ChatMessage(role="system", content=build_system_prompt(count)),
            ChatMessage(role="user", content=source_text),
        ]

        try:
            drafts = await self.completion_client.chat_completion(
                model=self.model,
                messages=messages,
                response_schema=FLASHCARD_LIST,
                schema_name=SCHEMA_NAME,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except CompletionError as e:
            logger.warning(
                "flashcard_generation_failed",
                model=self.model,
                error_type=type(e).__name__,
                error=e.message,
            )
            raise GenerationFailed(
                "The AI service could not generate flashcards. Please try again."
            ) from e

        if not drafts:
            logger.warning("flashcard_generation_empty", model=self.model)
            raise EmptyResultError(
                "No flashcards could be generated from this text. "
                "Please try again with different content."
            )

        suggestions = [FlashcardSuggestion(front=d.front, back=d.back) for d in drafts]
        result = GeneratedFlashcards(
            generation_id=GenerationId.generate(),
            model=self.model,
            suggestions=suggestions,
        )

        logger.info(
            "flashcard_suggestions_generated",
            generation_id=str(result.generation_id),
            model=self.model,
            suggestion_count=result.generated_count,
        )
        return result
