import random

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.common.clock import utc_now
from flashdeck.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.get_flashcard_use_case import (
    GetFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.list_flashcards_use_case import (
    ListFlashcardsUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.create_study_session_use_case import (
    CreateStudySessionUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.end_study_session_use_case import (
    EndStudySessionUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.get_session_stats_use_case import (
    GetSessionStatsUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.get_study_session_use_case import (
    GetStudySessionUseCase,
)
from flashdeck.application.learning.use_cases.study_sessions.rate_flashcard_use_case import (
    RateFlashcardUseCase,
)
from flashdeck.config import Settings, get_settings
from flashdeck.domain.learning.services.review_scheduler import ReviewScheduler
from flashdeck.domain.learning.services.session_builder import SessionBuilder
from flashdeck.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from flashdeck.infrastructure.identity.repositories.user_repository import UserRepository
from flashdeck.infrastructure.learning.repositories import (
    FlashcardRepository,
    SessionItemRepository,
    StudySessionRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)
    scheduling_config = providers.Singleton(Settings.scheduling_config, settings)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    study_session_repository = providers.Factory(StudySessionRepository, db=db)
    session_item_repository = providers.Factory(SessionItemRepository, db=db)
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Domain services (pure domain logic, no db)
    clock = providers.Object(utc_now)
    shuffler = providers.Singleton(random.Random)
    session_builder = providers.Factory(
        SessionBuilder, config=scheduling_config, shuffler=shuffler
    )
    review_scheduler = providers.Factory(ReviewScheduler, config=scheduling_config)

    # Identity use cases
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
    )

    # Learning module, flashcard use cases
    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
        scheduling_config=scheduling_config,
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
        unit_of_work=unit_of_work,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        unit_of_work=unit_of_work,
    )

    # Learning module, study session use cases
    get_session_stats_use_case = providers.Factory(
        GetSessionStatsUseCase,
        flashcard_repository=flashcard_repository,
        session_builder=session_builder,
        clock=clock,
    )
    create_study_session_use_case = providers.Factory(
        CreateStudySessionUseCase,
        flashcard_repository=flashcard_repository,
        study_session_repository=study_session_repository,
        session_builder=session_builder,
        unit_of_work=unit_of_work,
        clock=clock,
    )
    rate_flashcard_use_case = providers.Factory(
        RateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        study_session_repository=study_session_repository,
        session_item_repository=session_item_repository,
        review_scheduler=review_scheduler,
        unit_of_work=unit_of_work,
        clock=clock,
    )
    end_study_session_use_case = providers.Factory(
        EndStudySessionUseCase,
        study_session_repository=study_session_repository,
        unit_of_work=unit_of_work,
    )
    get_study_session_use_case = providers.Factory(
        GetStudySessionUseCase,
        study_session_repository=study_session_repository,
        flashcard_repository=flashcard_repository,
        session_item_repository=session_item_repository,
    )


# Initialize container
container = Container()
