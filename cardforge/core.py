from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from cardforge.application.learning.services.flashcard_generation_service import (
    FlashcardGenerationService,
)
from cardforge.application.learning.services.generation_ledger import GenerationLedger
from cardforge.application.learning.use_cases.flashcards import (
    CreateFlashcardsUseCase,
    DeleteFlashcardUseCase,
    GetFlashcardUseCase,
    ListFlashcardsUseCase,
    UpdateFlashcardUseCase,
)
from cardforge.application.learning.use_cases.generations import (
    GenerateFlashcardsUseCase,
    ListGenerationErrorLogsUseCase,
    ListGenerationsUseCase,
)
from cardforge.config import get_settings
from cardforge.infrastructure.ai.completion_client import CompletionClient
from cardforge.infrastructure.learning.repositories import (
    FlashcardRepository,
    GenerationErrorLogRepository,
    GenerationRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    generation_repository = providers.Factory(GenerationRepository, db=db)
    generation_error_log_repository = providers.Factory(GenerationErrorLogRepository, db=db)

    # AI (built on first use; raises ConfigurationError without an API key)
    completion_client = providers.Singleton(
        CompletionClient,
        api_key=settings.provided.OPENROUTER_API_KEY,
        base_url=settings.provided.OPENROUTER_BASE_URL,
        timeout_seconds=settings.provided.OPENROUTER_TIMEOUT_SECONDS,
    )

    # Application services
    flashcard_generation_service = providers.Factory(
        FlashcardGenerationService,
        completion_client=completion_client,
        model=settings.provided.AI_MODEL_NAME,
        flashcard_count=settings.provided.FLASHCARDS_PER_GENERATION,
        temperature=settings.provided.GENERATION_TEMPERATURE,
        max_tokens=settings.provided.GENERATION_MAX_TOKENS,
    )
    generation_ledger = providers.Factory(
        GenerationLedger,
        generation_repository=generation_repository,
        error_log_repository=generation_error_log_repository,
    )

    # Learning module use cases
    generate_flashcards_use_case = providers.Factory(
        GenerateFlashcardsUseCase,
        generation_service=flashcard_generation_service,
        ledger=generation_ledger,
    )
    list_generations_use_case = providers.Factory(
        ListGenerationsUseCase,
        generation_repository=generation_repository,
    )
    list_generation_error_logs_use_case = providers.Factory(
        ListGenerationErrorLogsUseCase,
        error_log_repository=generation_error_log_repository,
    )

    create_flashcards_use_case = providers.Factory(
        CreateFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
        generation_repository=generation_repository,
    )
    get_flashcard_use_case = providers.Factory(
        GetFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )
    list_flashcards_use_case = providers.Factory(
        ListFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
    )
    update_flashcard_use_case = providers.Factory(
        UpdateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )


# Initialize container
container = Container()
