"""Heuristic classification of raw search strings."""

import re

from ..schemas import QueryKind

ISBN_PATTERN = re.compile(r"^[\d\-\s]{10,17}$")
NAME_TOKEN_PATTERN = re.compile(r"^[a-zA-Z'.()-]+$")


def classify(raw: str) -> QueryKind:
    """Categorize a query as an ISBN, an author name, or general text.

    A query looks like an author name when it has two or three words made only
    of letters and name punctuation (e.g. "E.B. White", "Kate O'Hara").
    Classification only decides which extra endpoint is worth trying.

    Example:
        >>> classify("978-0-06-440055-8")
        <QueryKind.ISBN: 'isbn'>
        >>> classify("Roald Dahl")
        <QueryKind.AUTHOR_NAME: 'author_name'>
        >>> classify("the very hungry caterpillar")
        <QueryKind.GENERAL: 'general'>
    """
    query = (raw or "").strip()

    if ISBN_PATTERN.match(query):
        return QueryKind.ISBN

    words = query.split()
    if 2 <= len(words) <= 3 and all(NAME_TOKEN_PATTERN.match(w) for w in words):
        return QueryKind.AUTHOR_NAME

    return QueryKind.GENERAL
