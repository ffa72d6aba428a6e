from django import forms
from django.core.exceptions import ValidationError

from .identifiers import EMPTY_ID, coerce_ids
from .viewmodels import AuthorViewModel, BookViewModel


class MultipleUUIDField(forms.Field):
    """A multi-valued field of identifiers; unknown ids are left for the caller to drop."""

    widget = forms.SelectMultiple
    default_error_messages = {
        "invalid": "Enter valid identifiers.",
    }

    def to_python(self, value):
        try:
            return coerce_ids(value)
        except (TypeError, ValueError):
            raise ValidationError(self.error_messages["invalid"], code="invalid")


class BookForm(forms.Form):
    id = forms.UUIDField(required=False, widget=forms.HiddenInput)
    title = forms.CharField(max_length=200)
    author_ids = MultipleUUIDField(required=False)

    def to_view_model(self):
        data = self.cleaned_data
        return BookViewModel(
            id=data.get("id") or EMPTY_ID,
            title=data["title"],
            author_ids=data.get("author_ids") or [],
        )


class AuthorForm(forms.Form):
    id = forms.UUIDField(required=False, widget=forms.HiddenInput)
    name = forms.CharField(max_length=100)
    book_ids = MultipleUUIDField(required=False)

    def to_view_model(self):
        data = self.cleaned_data
        return AuthorViewModel(
            id=data.get("id") or EMPTY_ID,
            name=data["name"],
            book_ids=data.get("book_ids") or [],
        )
