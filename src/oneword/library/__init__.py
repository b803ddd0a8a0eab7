"""Book model, JSON library store and library queries."""

from .models import Book
from .query import SortOption, search, sort_books
from .store import Library

__all__ = ["Book", "Library", "SortOption", "search", "sort_books"]
