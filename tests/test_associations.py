import uuid

import pytest

from shelfsync.associations import insert, reconcile
from shelfsync.models import Author, Book
from shelfsync.viewmodels import InvalidArgument

pytestmark = pytest.mark.django_db


def author_ids(book):
    return {author.pk for author in book.authors.all()}


def test_reconcile_replaces_whole_set(make_author, make_book):
    a1, a2, a3 = make_author("A1"), make_author("A2"), make_author("A3")
    b1 = make_book("B1", authors=[a1, a2])

    reconcile(b1, [a2.pk, a3.pk], Author.objects.all())

    assert author_ids(b1) == {a2.pk, a3.pk}
    assert list(a1.books.all()) == []
    assert list(a3.books.all()) == [b1]


def test_reconcile_is_idempotent(make_author, make_book):
    a1, a2 = make_author("A1"), make_author("A2")
    b1 = make_book("B1")

    reconcile(b1, [a1.pk, a2.pk], Author.objects.all())
    once = author_ids(b1)
    reconcile(b1, [a1.pk, a2.pk], Author.objects.all())

    assert author_ids(b1) == once == {a1.pk, a2.pk}
    assert b1.authors.through.objects.count() == 2


def test_reconcile_with_empty_list_clears(make_author, make_book):
    a1 = make_author("A1")
    b1 = make_book("B1", authors=[a1])

    reconcile(b1, [], Author.objects.all())

    assert author_ids(b1) == set()
    assert Author.objects.filter(pk=a1.pk).exists()


def test_reconcile_with_none_clears(make_author, make_book):
    a1 = make_author("A1")
    b1 = make_book("B1", authors=[a1])

    reconcile(b1, None, Author.objects.all())

    assert author_ids(b1) == set()


def test_reconcile_ignores_unknown_ids(make_author, make_book):
    a1 = make_author("A1")
    b1 = make_book("B1")

    reconcile(b1, [uuid.uuid4(), str(a1.pk)], Author.objects.all())

    assert author_ids(b1) == {a1.pk}


def test_reconcile_collapses_duplicates(make_author, make_book):
    a1 = make_author("A1")
    b1 = make_book("B1")

    reconcile(b1, [a1.pk, a1.pk, str(a1.pk)], Author.objects.all())

    assert b1.authors.count() == 1


def test_reconcile_only_links_from_pool(make_author, make_book):
    a1, a2 = make_author("A1"), make_author("A2")
    b1 = make_book("B1")

    reconcile(b1, [a1.pk, a2.pk], Author.objects.filter(pk=a1.pk))

    assert author_ids(b1) == {a1.pk}


def test_reconcile_from_author_side(make_author, make_book):
    b1, b2 = make_book("B1"), make_book("B2")
    a1 = make_author("A1", books=[b1])

    result = reconcile(a1, [b2.pk], Book.objects.all())

    assert result is a1
    assert list(a1.books.all()) == [b2]
    assert list(b1.authors.all()) == []
    assert list(b2.authors.all()) == [a1]


def test_reconcile_refreshes_prefetched_set(make_author, make_book):
    a1, a2 = make_author("A1"), make_author("A2")
    make_book("B1", authors=[a1])
    b1 = Book.objects.prefetch_related("authors").get(title="B1")

    reconcile(b1, [a2.pk], Author.objects.all())

    assert list(b1.authors.all()) == [a2]


def test_reconcile_rejects_missing_parent():
    with pytest.raises(InvalidArgument):
        reconcile(None, [], [])


def test_reconcile_rejects_unrelated_type():
    with pytest.raises(InvalidArgument):
        reconcile(object(), [], [])


def test_insert_saves_and_links(make_author):
    a1 = make_author("A1")
    book = Book(title="B1")

    insert(book, [a1])

    stored = Book.objects.get(pk=book.pk)
    assert list(stored.authors.all()) == [a1]
    assert list(a1.books.all()) == [stored]


def test_insert_without_related():
    author = insert(Author(name="A1"), [])

    assert Author.objects.get(pk=author.pk).books.count() == 0
