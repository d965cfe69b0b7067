"""
In-memory book store.
Holds books in insertion order and hands out ids from a process-wide counter.
"""

import threading
from typing import List, Optional

from models.book import Book


class BookStore:
    """Insertion-ordered collection of books with monotonic id assignment."""

    def __init__(self):
        self._books: List[Book] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._books)

    def next_id(self) -> int:
        """Return a fresh id. Ids start at 1 and are never reused."""
        with self._lock:
            return self._next_id_locked()

    def _next_id_locked(self) -> int:
        self._last_id += 1
        return self._last_id

    def add(self, title: str, author: str) -> Book:
        """Create a book with the next id and append it to the store."""
        with self._lock:
            book = Book(title=title, author=author, id=self._next_id_locked())
            self._books.append(book)
        return book

    def list_all(self) -> List[Book]:
        """Return every book in insertion order."""
        return list(self._books)

    def find_by_id(self, book_id: int) -> Optional[Book]:
        """Linear scan for a book by id. Returns None when it is absent."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None
