from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Bir kitabın ait olabileceği sabit kategoriler."""

    FICTION = "FICTION"
    SCIENCE = "SCIENCE"
    HISTORY = "HISTORY"
    TECHNOLOGY = "TECHNOLOGY"
    COMICS = "COMICS"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def names(cls) -> list[str]:
        return [member.name for member in cls]


class Book:
    """Envanterdeki tek bir kitap kaydını temsil eder."""

    def __init__(self, book_id: int, title: str, author: str, category: Category) -> None:
        # id oluşturulduktan sonra asla değişmez
        self._id = book_id
        self.title = title.strip()
        self.author = author.strip()
        self.category = category

    @property
    def id(self) -> int:
        return self._id

    def __str__(self) -> str:
        return f"[{self.id}] {self.title} by {self.author} ({self.category})"

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r}, category={self.category.name})"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "category": self.category.name,
        }
