from abc import ABC, abstractmethod
from library_system.constants import FICTION_KIND, TECHNICAL_KIND, FICTION_FORMAT, TECHNICAL_FORMAT


class Book(ABC):
    """
    The base class of every book in the library

    Attributes
    ----------
    title: str
        The title of the book
    author: str
        The author of the book

    Methods
    -------
    describe()
        Get the one line description of the book
    show_info()
        Print the description of the book
    """
    kind = None

    def __init__(self, title: str, author: str):
        self._title = title
        self._author = author

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @abstractmethod
    def describe(self) -> str:
        pass

    def show_info(self):
        print(self.describe())

    def __repr__(self):
        return f"{type(self).__name__}(title={self.title!r}, author={self.author!r})"


class FictionBook(Book):
    kind = FICTION_KIND

    def describe(self) -> str:
        return FICTION_FORMAT.format(title=self.title, author=self.author)


class TechnicalBook(Book):
    kind = TECHNICAL_KIND

    def describe(self) -> str:
        return TECHNICAL_FORMAT.format(title=self.title, author=self.author)
