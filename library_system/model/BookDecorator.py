from abc import abstractmethod
from library_system.constants import RESERVED_NOTE
from library_system.model.Book import Book


class BookDecorator(Book):
    """
    The base class to add behaviour on top of an existing book

    The decorator shares the title and author of the wrapped book and never
    changes it. Decorators can wrap other decorators.

    Attributes
    ----------
    wrapped: Book
        The decorated book
    """
    def __init__(self, book: Book):
        if not isinstance(book, Book):
            raise TypeError(f"Can only decorate a Book, got {type(book).__name__}")
        super().__init__(book.title, book.author)
        self._book = book

    @property
    def wrapped(self) -> Book:
        return self._book

    @property
    def kind(self):
        return self._book.kind

    @abstractmethod
    def describe(self) -> str:
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self._book!r})"


class ReservedBook(BookDecorator):
    """Book marked as reserved"""

    def describe(self) -> str:
        return f"{self._book.describe()}\n{RESERVED_NOTE}"
