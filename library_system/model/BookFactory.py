from library_system.model.Book import Book, FictionBook, TechnicalBook
from library_system.utils.Logger import setup_logger
from library_system.utils.SingletonMeta import SingletonMeta


class InvalidArgument(ValueError):
    """Raised when a book is requested with an unknown type tag"""


class BookFactory(metaclass=SingletonMeta):
    """
    The class to create books from a type tag

    Attributes
    ----------
    logger: logger object
        The object to log information

    Methods
    -------
    kinds()
        Get the supported type tags
    create(kind, title, author)
        Create the book matching the type tag, ignoring case
    """
    _BOOK_TYPES = {
        FictionBook.kind: FictionBook,
        TechnicalBook.kind: TechnicalBook,
    }

    def __init__(self):
        self.logger = setup_logger()

    @classmethod
    def kinds(cls):
        return tuple(cls._BOOK_TYPES)

    def create(self, kind, title, author) -> Book:
        """
        Create a book

        Parameters
        ----------
        kind: str
            The type tag, 'ficcion' or 'tecnico' in any case
        title: str
            The title of the book
        author: str
            The author of the book

        Returns
        -------
        Book
            The new FictionBook or TechnicalBook

        Raises
        ------
        InvalidArgument
            If the type tag is not supported
        """
        book_type = self._BOOK_TYPES.get(kind.lower()) if isinstance(kind, str) else None
        if book_type is None:
            self.logger.error(f"Invalid book type requested: {kind!r}")
            raise InvalidArgument(f"invalid book type: {kind!r}, expected one of {self.kinds()}")
        book = book_type(title, author)
        self.logger.debug(f"Created {book!r}")
        return book


def create_book(kind, title, author) -> Book:
    return BookFactory().create(kind, title, author)
