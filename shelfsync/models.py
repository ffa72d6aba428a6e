import uuid

from django.db import models


class Author(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name


class Book(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    # Single join table; Author.books is the reverse side of the same rows.
    authors = models.ManyToManyField(Author, related_name="books", blank=True)

    class Meta:
        ordering = ("title",)

    def __str__(self):
        return self.title
