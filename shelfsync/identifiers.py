"""Helpers for the UUID identifiers shared by books and authors."""
import uuid

EMPTY_ID = uuid.UUID(int=0)


def is_empty_id(value):
    return value is None or value == EMPTY_ID


def coerce_ids(values):
    """
    Normalise submitted identifiers to a list of UUIDs.

    ``None`` means "nothing submitted" and yields an empty list. Blank strings
    are skipped and duplicates keep their first position. A malformed string
    raises ``ValueError``.
    """
    if values is None:
        return []
    if isinstance(values, (str, uuid.UUID)):
        values = [values]

    ids = []
    seen = set()
    for value in values:
        if not isinstance(value, uuid.UUID):
            value = str(value).strip()
            if not value:
                continue
            value = uuid.UUID(value)
        if value not in seen:
            seen.add(value)
            ids.append(value)
    return ids
