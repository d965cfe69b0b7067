from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    # Field order is the serialised key order
    title: str
    author: str
    id: int

    def __repr__(self):
        return f'<Book {self.id}: {self.title} by {self.author}>'
