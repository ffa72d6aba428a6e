import pytest

from shelfsync.models import Author, Book


@pytest.fixture
def make_author(db):
    def _make(name="Author", books=()):
        author = Author.objects.create(name=name)
        author.books.set(books)
        return author

    return _make


@pytest.fixture
def make_book(db):
    def _make(title="Book", authors=()):
        book = Book.objects.create(title=title)
        book.authors.set(authors)
        return book

    return _make
