"""Stateless scheduling services of the learning context."""

from .review_scheduler import ReviewScheduler
from .session_builder import SessionBuilder, SessionStats, Shuffler

__all__ = ["ReviewScheduler", "SessionBuilder", "SessionStats", "Shuffler"]
