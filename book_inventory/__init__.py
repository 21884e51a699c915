"""Book Inventory - Core Application Package

This package contains the core application modules including:
- Book record and category models (book.py)
- Bounded in-memory record store (library.py)
"""

from book_inventory.book import Book, Category
from book_inventory.library import (
    BookNotFoundError,
    Library,
    LibraryError,
    Outcome,
    StorageFullError,
)

__all__ = [
    "Book",
    "BookNotFoundError",
    "Category",
    "Library",
    "LibraryError",
    "Outcome",
    "StorageFullError",
]
