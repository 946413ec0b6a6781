"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects.ids import UserId

MAX_EMAIL_LENGTH = 255


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity.

    Credentials live with the external identity provider; this service only
    needs a stable id to scope flashcards and study sessions.
    """

    id: UserId
    email: str
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email or not self.email.strip():
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )

    @classmethod
    def create_with_id(cls, id: UserId, email: str, created_at: datetime | None) -> "User":
        """Reconstitute a user from persistence."""
        return cls(id=id, email=email, created_at=created_at)
