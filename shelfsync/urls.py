from django.urls import path
from . import views

urlpatterns = [
    path("", views.home, name="home"),
    path("privacy/", views.privacy, name="privacy"),
    path("books/", views.book_list, name="book_list"),
    path("books/create/", views.book_create, name="book_create"),
    path("books/<uuid:pk>/", views.book_detail, name="book_detail"),
    path("books/<uuid:pk>/edit/", views.book_edit, name="book_edit"),
    path("books/<uuid:pk>/delete/", views.book_delete, name="book_delete"),
    path("authors/", views.author_list, name="author_list"),
    path("authors/create/", views.author_create, name="author_create"),
    path("authors/<uuid:pk>/", views.author_detail, name="author_detail"),
    path("authors/<uuid:pk>/edit/", views.author_edit, name="author_edit"),
    path("authors/<uuid:pk>/delete/", views.author_delete, name="author_delete"),
]
