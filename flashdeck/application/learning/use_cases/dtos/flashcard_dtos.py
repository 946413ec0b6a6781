"""DTOs for flashcard use cases."""

from dataclasses import dataclass, field

from flashdeck.domain.learning.entities.flashcard import Flashcard


@dataclass
class CreatedFlashcard:
    """A newly created flashcard plus duplicate warnings."""

    flashcard: Flashcard
    warnings: list[str] = field(default_factory=list)
