from flask import current_app

from models.book import Book
from models.store import BookStore


def get_book_store() -> BookStore:
    """Return the book store owned by the current application."""
    return current_app.extensions['book_store']
