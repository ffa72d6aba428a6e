"""Replace-all synchronisation of the book/author association."""
import logging

from django.db import transaction

from .identifiers import coerce_ids
from .models import Author, Book
from .viewmodels import InvalidArgument

logger = logging.getLogger(__name__)

# Both names are managers over the same join table.
RELATIONS = {
    Book: "authors",
    Author: "books",
}


def _relation_name(entity):
    if entity is None:
        raise InvalidArgument("cannot link a missing entity")
    try:
        return RELATIONS[type(entity)]
    except KeyError:
        raise InvalidArgument(f"{type(entity).__name__} has no book/author association") from None


def reconcile(parent, submitted_ids, available):
    """
    Make ``parent``'s association set exactly the entities of ``available``
    whose id appears in ``submitted_ids``.

    Previous links not in the selection are removed and new ones added in one
    atomic step. ``None`` submits nothing and clears the set. Ids that match
    nothing in ``available`` are dropped.
    """
    manager = getattr(parent, _relation_name(parent))
    wanted = set(coerce_ids(submitted_ids))
    selected = [candidate for candidate in available if candidate.pk in wanted]

    dropped = wanted - {candidate.pk for candidate in selected}
    if dropped:
        logger.debug(f"Ignoring {len(dropped)} unknown id(s) while linking {parent.pk}")

    with transaction.atomic():
        manager.set(selected, clear=True)
    return parent


def insert(entity, related):
    """Save a freshly resolved entity and link ``related`` to it."""
    relation = _relation_name(entity)
    with transaction.atomic():
        entity.save(force_insert=True)
        getattr(entity, relation).set(related)
    return entity
