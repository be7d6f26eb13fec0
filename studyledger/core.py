from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from studyledger.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from studyledger.application.learning.services.learner_stats_service import LearnerStatsService
from studyledger.application.learning.services.streak_tracker import StreakTracker
from studyledger.application.learning.use_cases.progress.get_item_progress_use_case import (
    GetItemProgressUseCase,
)
from studyledger.application.learning.use_cases.statistics.get_learner_stats_use_case import (
    GetLearnerStatsUseCase,
)
from studyledger.application.learning.use_cases.statistics.get_review_history_use_case import (
    GetReviewHistoryUseCase,
)
from studyledger.application.learning.use_cases.study_sessions.submit_study_session_use_case import (  # noqa: E501
    SubmitStudySessionUseCase,
)
from studyledger.config import get_settings
from studyledger.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from studyledger.infrastructure.identity.repositories.user_repository import UserRepository
from studyledger.infrastructure.learning.repositories import (
    ItemCatalog,
    ItemProgressRepository,
    ReviewLedgerRepository,
    StudySessionRepository,
    StudyStreakRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Transaction boundary shared by the repositories of a request
    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Repositories
    item_catalog = providers.Factory(ItemCatalog, db=db)
    item_progress_repository = providers.Factory(ItemProgressRepository, db=db)
    review_ledger_repository = providers.Factory(ReviewLedgerRepository, db=db)
    study_session_repository = providers.Factory(StudySessionRepository, db=db)
    study_streak_repository = providers.Factory(StudyStreakRepository, db=db)

    # Identity repositories
    user_repository = providers.Factory(UserRepository, db=db)

    # Application services
    streak_tracker = providers.Factory(
        StreakTracker,
        streak_repository=study_streak_repository,
        unit_of_work=unit_of_work,
    )
    learner_stats_service = providers.Factory(
        LearnerStatsService,
        progress_repository=item_progress_repository,
        review_ledger=review_ledger_repository,
        session_repository=study_session_repository,
        streak_repository=study_streak_repository,
    )

    # Learning module, application use cases
    submit_study_session_use_case = providers.Factory(
        SubmitStudySessionUseCase,
        catalog=item_catalog,
        progress_repository=item_progress_repository,
        review_ledger=review_ledger_repository,
        session_repository=study_session_repository,
        streak_tracker=streak_tracker,
        stats_service=learner_stats_service,
        unit_of_work=unit_of_work,
        max_reviews_per_batch=settings.provided.MAX_REVIEWS_PER_BATCH,
        default_study_mode=settings.provided.DEFAULT_STUDY_MODE,
    )
    get_learner_stats_use_case = providers.Factory(
        GetLearnerStatsUseCase,
        stats_service=learner_stats_service,
    )
    get_review_history_use_case = providers.Factory(
        GetReviewHistoryUseCase,
        stats_service=learner_stats_service,
        default_days=settings.provided.REVIEW_HISTORY_DAYS,
    )
    get_item_progress_use_case = providers.Factory(
        GetItemProgressUseCase,
        progress_repository=item_progress_repository,
    )

    # Identity module, application use cases
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
    )


container = Container()
