import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

from book_inventory.book import Book, Category
from config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LibraryError(Exception):
    """Kütüphane işlemlerinin döndürdüğü hataların temel sınıfı."""


class StorageFullError(LibraryError):
    """Depo kapasitesi dolduğunda yeni kitap eklenemez."""


class BookNotFoundError(LibraryError):
    """Verilen id'ye sahip kitap depoda yok."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book ID {book_id} not found.")
        self.book_id = book_id


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Bir depo işleminin sonucu: ya bir değer ya da bir hata taşır."""

    value: Optional[T] = None
    error: Optional[LibraryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LibraryError) -> "Outcome[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Değeri döndür; işlem başarısızsa taşınan hatayı yükselt."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


class Library:
    """Sabit kapasiteli, sıralı kitap koleksiyonunu yönetir.

    Kayıtlar ekleme sırasını korur. Id üreteci yalnızca artar, bu yüzden
    silinen bir kitabın id'si hiçbir zaman yeniden kullanılmaz.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        capacity = settings.max_books if capacity is None else capacity
        if capacity < 1:
            raise ValueError("Capacity must be at least 1.")
        self._capacity = capacity
        self._books: List[Book] = []
        self._next_id = 1

    # ------------------------- Özellikler ------------------------- #
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return len(self._books)

    @property
    def is_full(self) -> bool:
        return self.size >= self._capacity

    @property
    def is_empty(self) -> bool:
        return not self._books

    def __len__(self) -> int:
        return self.size

    # ------------------------- Çekirdek işlemler ------------------------- #
    def check_capacity(self) -> Outcome[int]:
        """Boş yer sayısını döndür; depo doluysa StorageFullError."""
        if self.is_full:
            logger.info("Storage full (%d/%d)", self.size, self._capacity)
            return Outcome.failure(StorageFullError("Storage is full."))
        return Outcome.success(self._capacity - self.size)

    def insert(self, title: str, author: str, category: Category) -> Outcome[Book]:
        """Yeni bir kitap ekle. Depo doluysa StorageFullError döndürür."""
        capacity = self.check_capacity()
        if not capacity.ok:
            return Outcome.failure(capacity.error)

        book = Book(self._next_id, title, author, category)
        self._next_id += 1
        self._books.append(book)
        logger.debug("Inserted %r", book)
        return Outcome.success(book)

    def list_all(self) -> List[Book]:
        """Tüm kitapları ekleme sırasıyla döndür."""
        return list(self._books)

    def find_by_id(self, book_id: int) -> Outcome[Book]:
        index = self._index_of(book_id)
        if index is None:
            logger.info("Lookup failed for id %s", book_id)
            return Outcome.failure(BookNotFoundError(book_id))
        return Outcome.success(self._books[index])

    def filter_by_category(self, category: Category) -> List[Book]:
        """Verilen kategorideki kitapları ekleme sırasıyla döndür."""
        return [book for book in self._books if book.category is category]

    def delete_by_id(self, book_id: int) -> Outcome[Book]:
        """Kitabı sil; sonraki kayıtlar sıralarını koruyarak bir öne kayar."""
        index = self._index_of(book_id)
        if index is None:
            logger.info("Delete failed for id %s", book_id)
            return Outcome.failure(BookNotFoundError(book_id))
        removed = self._books.pop(index)
        logger.debug("Deleted %r", removed)
        return Outcome.success(removed)

    def update(
        self,
        book_id: int,
        *,
        title: Optional[str] = None,
        author: Optional[str] = None,
        category: Optional[Category] = None,
    ) -> Outcome[Book]:
        """Id'ye göre bir kitabı yerinde güncelle.

        Boş ya da yalnızca boşluk içeren başlık/yazar "değiştirme" anlamına gelir.
        Kitap bulunamazsa hiçbir alan değişmez.
        """
        index = self._index_of(book_id)
        if index is None:
            logger.info("Update failed for id %s", book_id)
            return Outcome.failure(BookNotFoundError(book_id))

        update_fields: Dict[str, Any] = {}
        if title is not None and title.strip():
            update_fields["title"] = title.strip()
        if author is not None and author.strip():
            update_fields["author"] = author.strip()
        if category is not None:
            update_fields["category"] = category

        book = self._books[index]
        for field_name, value in update_fields.items():
            setattr(book, field_name, value)
        if update_fields:
            logger.debug("Updated id %s fields=%s", book_id, sorted(update_fields))
        return Outcome.success(book)

    def statistics(self) -> Dict[str, Any]:
        """Depo istatistiklerini al."""
        by_category = {name: 0 for name in Category.names()}
        for book in self._books:
            by_category[book.category.name] += 1
        return {
            "total_books": self.size,
            "capacity": self._capacity,
            "free_slots": self._capacity - self.size,
            "by_category": by_category,
        }

    # ------------------------- Yardımcılar ------------------------- #
    def _index_of(self, book_id: int) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
