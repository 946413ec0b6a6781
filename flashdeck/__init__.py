"""flashdeck - flashcard study service with spaced-repetition scheduling."""

__version__ = "0.1.0"
