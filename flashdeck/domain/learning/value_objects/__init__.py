"""Value objects of the learning context."""

from .rating import Rating
from .review_state import ReviewState

__all__ = ["Rating", "ReviewState"]
