import io
import unittest
from contextlib import redirect_stdout
from library_system.model.Book import Book, FictionBook, TechnicalBook

class TestBooks(unittest.TestCase):

    def test_book_is_abstract(self):
        with self.assertRaises(TypeError):
            Book("Title", "Author")

    def test_fiction_describe(self):
        book = FictionBook("Harry Potter", "J.K. Rowling")
        self.assertEqual(book.describe(), "Fiction Book: Harry Potter by J.K. Rowling")

    def test_technical_describe(self):
        book = TechnicalBook("Design Patterns", "Gamma")
        self.assertEqual(book.describe(), "Technical Book: Design Patterns by Gamma")

    def test_variants_are_distinguishable(self):
        fiction = FictionBook("Same", "Writer")
        technical = TechnicalBook("Same", "Writer")
        self.assertNotEqual(fiction.describe(), technical.describe())

    def test_title_and_author_are_read_only(self):
        book = FictionBook("Dune", "Frank Herbert")
        with self.assertRaises(AttributeError):
            book.title = "Other"
        with self.assertRaises(AttributeError):
            book.author = "Other"

    def test_show_info_prints_description(self):
        book = TechnicalBook("Refactoring", "Fowler")
        out = io.StringIO()
        with redirect_stdout(out):
            book.show_info()
        self.assertEqual(out.getvalue(), "Technical Book: Refactoring by Fowler\n")

    def test_repr(self):
        self.assertEqual(repr(FictionBook("Emma", "Austen")), "FictionBook(title='Emma', author='Austen')")

if __name__ == '__main__':
    unittest.main()
