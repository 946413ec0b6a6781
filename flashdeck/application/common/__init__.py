"""Shared application building blocks."""

from .pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination
from .unit_of_work import UnitOfWork

__all__ = ["MAX_PAGE_SIZE", "PaginatedResult", "Pagination", "UnitOfWork"]
