from typing import List

from models import Book, BookStore

SEED_BOOKS = [
    {'title': "Ender's Game", 'author': 'Orson Scott Card'},
    {'title': 'Code Complete', 'author': 'Steve McConnell'},
    {'title': 'World War Z', 'author': 'Max Brooks'},
    {'title': 'Pragmatic Programmer', 'author': 'David Thomas'},
]


def seed_store(store: BookStore) -> List[Book]:
    """Add the bootstrap books to the store, in order."""
    return [store.add(entry['title'], entry['author']) for entry in SEED_BOOKS]


if __name__ == '__main__':
    store = BookStore()
    print("Creating sample books...")
    for book in seed_store(store):
        print(f"  {book.id}: {book.title} by {book.author}")
    print(f"Done! {len(store)} books.")
