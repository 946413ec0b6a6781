"""
Learning bounded context - Domain layer.

Flashcards and the spaced-repetition scheduling core:
- Flashcard: aggregate root carrying the card content and its review state
- StudySession: aggregate root holding the fixed deck of one sitting
- SessionItem: append-only record of one rating
- SessionBuilder: picks the deck for a new session
- ReviewScheduler: computes a card's next review state from a rating
"""
