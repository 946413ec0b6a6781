"""Identity bounded context - users who own flashcards and sessions."""
