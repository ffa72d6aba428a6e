"""
Flat view-models for books and authors, and the mapping to and from entities.

Books and authors reference each other, so a projection carries an explicit
``depth``: the related ids are always filled, but the nested related
view-models are only expanded while ``depth > 0``.
"""
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .identifiers import EMPTY_ID, coerce_ids, is_empty_id
from .models import Author, Book

DEFAULT_DEPTH = 1


class InvalidArgument(ValueError):
    """Raised when a mapping helper is handed something it cannot map."""


@dataclass
class BookViewModel:
    id: uuid.UUID = EMPTY_ID
    title: str = ""
    author_ids: Optional[List[uuid.UUID]] = field(default_factory=list)
    authors: List["AuthorViewModel"] = field(default_factory=list)


@dataclass
class AuthorViewModel:
    id: uuid.UUID = EMPTY_ID
    name: str = ""
    book_ids: Optional[List[uuid.UUID]] = field(default_factory=list)
    books: List[BookViewModel] = field(default_factory=list)


def project_book(book: Book, depth: int = DEFAULT_DEPTH) -> BookViewModel:
    if book is None:
        raise InvalidArgument("cannot project a missing book")

    authors = list(book.authors.all())
    return BookViewModel(
        id=book.pk,
        title=book.title,
        author_ids=[author.pk for author in authors],
        authors=[project_author(author, depth - 1) for author in authors] if depth > 0 else [],
    )


def project_author(author: Author, depth: int = DEFAULT_DEPTH) -> AuthorViewModel:
    if author is None:
        raise InvalidArgument("cannot project a missing author")

    books = list(author.books.all())
    return AuthorViewModel(
        id=author.pk,
        name=author.name,
        book_ids=[book.pk for book in books],
        books=[project_book(book, depth - 1) for book in books] if depth > 0 else [],
    )


def project(entity, depth: int = DEFAULT_DEPTH):
    if entity is None:
        raise InvalidArgument("cannot project a missing entity")
    if isinstance(entity, Book):
        return project_book(entity, depth)
    if isinstance(entity, Author):
        return project_author(entity, depth)
    raise InvalidArgument(f"cannot project {type(entity).__name__}")


def _select(pool, ids):
    wanted = set(coerce_ids(ids))
    return [candidate for candidate in pool if candidate.pk in wanted]


def resolve_book(vm: BookViewModel, available_authors):
    """
    Build an unsaved Book from ``vm``.

    Returns ``(book, authors)``: the selected authors are the members of
    ``available_authors`` whose id is listed in ``vm.author_ids``. They are
    returned alongside because an unsaved row cannot hold many-to-many links.
    """
    book = Book(
        id=uuid.uuid4() if is_empty_id(vm.id) else vm.id,
        title=vm.title,
    )
    return book, _select(available_authors, vm.author_ids)


def resolve_author(vm: AuthorViewModel, available_books):
    """Build an unsaved Author from ``vm``; see :func:`resolve_book`."""
    author = Author(
        id=uuid.uuid4() if is_empty_id(vm.id) else vm.id,
        name=vm.name,
    )
    return author, _select(available_books, vm.book_ids)
