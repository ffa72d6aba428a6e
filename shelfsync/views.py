import logging
import uuid

from django.core.exceptions import BadRequest
from django.shortcuts import get_object_or_404, redirect, render

from .associations import insert, reconcile
from .forms import AuthorForm, BookForm
from .identifiers import EMPTY_ID
from .models import Author, Book
from .viewmodels import project_author, project_book, resolve_author, resolve_book

logger = logging.getLogger(__name__)


def _choices(pool, selected):
    # selected may hold raw POST strings or UUIDs
    selected = {str(value) for value in selected}
    return [
        {"id": candidate.pk, "label": str(candidate), "selected": str(candidate.pk) in selected}
        for candidate in pool
    ]


def _selected(form, field):
    if form.is_bound:
        return form.data.getlist(field)
    return form.initial.get(field) or []


def _check_payload_id(form, pk):
    if form.cleaned_data.get("id") != pk:
        raise BadRequest("Route id does not match submitted id")


def home(request):
    return render(
        request,
        "shelfsync/home.html",
        {
            "book_count": Book.objects.count(),
            "author_count": Author.objects.count(),
        },
    )


def privacy(request):
    return render(request, "shelfsync/privacy.html")


# ---- books ----


def book_list(request):
    books = Book.objects.prefetch_related("authors__books")
    return render(request, "shelfsync/book_list.html", {"books": [project_book(b) for b in books]})


def book_detail(request, pk):
    book = get_object_or_404(Book.objects.prefetch_related("authors__books"), pk=pk)
    return render(request, "shelfsync/book_detail.html", {"book": project_book(book)})


def _book_form(request, form, book=None):
    return render(
        request,
        "shelfsync/book_form.html",
        {
            "form": form,
            "book": book,
            "authors": _choices(Author.objects.all(), _selected(form, "author_ids")),
        },
    )


def book_create(request):
    if request.method == "POST":
        form = BookForm(request.POST)
        if form.is_valid():
            vm = form.to_view_model()
            # new rows always get a fresh id
            vm.id = EMPTY_ID
            book, authors = resolve_book(vm, Author.objects.all())
            insert(book, authors)
            logger.info(f"Created book {book.pk} with {len(authors)} author(s)")
            return redirect("book_list")
    else:
        form = BookForm()

    return _book_form(request, form)


def book_edit(request, pk):
    book = get_object_or_404(Book.objects.prefetch_related("authors"), pk=pk)

    if request.method == "POST":
        form = BookForm(request.POST)
        valid = form.is_valid()
        _check_payload_id(form, book.pk)
        if valid:
            vm = form.to_view_model()
            book.title = vm.title
            book.save(update_fields=["title"])
            reconcile(book, vm.author_ids, Author.objects.all())
            logger.info(f"Updated book {book.pk}")
            return redirect("book_list")
    else:
        vm = project_book(book, depth=0)
        form = BookForm(initial={"id": vm.id, "title": vm.title, "author_ids": vm.author_ids})

    return _book_form(request, form, book=book)


def book_delete(request, pk):
    book = get_object_or_404(Book.objects.prefetch_related("authors__books"), pk=pk)

    if request.method == "POST":
        book.delete()
        logger.info(f"Deleted book {pk}")
        return redirect("book_list")

    return render(request, "shelfsync/book_confirm_delete.html", {"book": project_book(book)})


# ---- authors ----


def author_list(request):
    authors = Author.objects.prefetch_related("books__authors")
    return render(request, "shelfsync/author_list.html", {"authors": [project_author(a) for a in authors]})


def author_detail(request, pk):
    author = get_object_or_404(Author.objects.prefetch_related("books__authors"), pk=pk)
    return render(request, "shelfsync/author_detail.html", {"author": project_author(author)})


def _author_form(request, form, author=None):
    return render(
        request,
        "shelfsync/author_form.html",
        {
            "form": form,
            "author": author,
            "books": _choices(Book.objects.all(), _selected(form, "book_ids")),
        },
    )


def author_create(request):
    if request.method == "POST":
        form = AuthorForm(request.POST)
        if form.is_valid():
            vm = form.to_view_model()
            vm.id = EMPTY_ID
            author, books = resolve_author(vm, Book.objects.all())
            insert(author, books)
            logger.info(f"Created author {author.pk} with {len(books)} book(s)")
            return redirect("author_list")
    else:
        form = AuthorForm()

    return _author_form(request, form)


def author_edit(request, pk):
    author = get_object_or_404(Author.objects.prefetch_related("books"), pk=pk)

    if request.method == "POST":
        form = AuthorForm(request.POST)
        valid = form.is_valid()
        _check_payload_id(form, author.pk)
        if valid:
            vm = form.to_view_model()
            author.name = vm.name
            author.save(update_fields=["name"])
            reconcile(author, vm.book_ids, Book.objects.all())
            logger.info(f"Updated author {author.pk}")
            return redirect("author_list")
    else:
        vm = project_author(author, depth=0)
        form = AuthorForm(initial={"id": vm.id, "name": vm.name, "book_ids": vm.book_ids})

    return _author_form(request, form, author=author)


def author_delete(request, pk):
    author = get_object_or_404(Author.objects.prefetch_related("books__authors"), pk=pk)

    if request.method == "POST":
        author.delete()
        logger.info(f"Deleted author {pk}")
        return redirect("author_list")

    return render(request, "shelfsync/author_confirm_delete.html", {"author": project_author(author)})


# ---- error pages ----


def _error_page(request, status, title):
    request_id = request.META.get("HTTP_X_REQUEST_ID") or uuid.uuid4().hex
    logger.warning(f"{status} {title}: {request.path} (request {request_id})")
    return render(
        request,
        "shelfsync/error.html",
        {
            "status": status,
            "title": title,
            "request_id": request_id,
        },
        status=status,
    )


def bad_request(request, exception=None):
    return _error_page(request, 400, "Bad request")


def page_not_found(request, exception=None):
    return _error_page(request, 404, "Not found")


def server_error(request):
    return _error_page(request, 500, "Server error")
