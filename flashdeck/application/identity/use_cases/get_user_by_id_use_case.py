"""Use case for loading the authenticated user (used by dependency injection)."""

import structlog

from flashdeck.application.identity.protocols.user_repository import UserRepositoryProtocol
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class GetUserByIdUseCase:
    """Use case for loading the authenticated user."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            logger.info("user_not_found", user_id=user_id)
            raise UserNotFoundError(user_id)
        return user
