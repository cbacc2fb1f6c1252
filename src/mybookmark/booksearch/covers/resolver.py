"""Cover image selection for catalog records."""

from typing import Optional

from ..api.openlibrary import isbn_cover_url
from ..schemas import normalize_cover_url


def best_cover(
    image: Optional[str],
    isbn13: Optional[str] = None,
    isbn10: Optional[str] = None,
) -> Optional[str]:
    """Pick the best cover URL for a record.

    Priority, first match wins:
    1. The record's own image, unless it is a placeholder or not a web URL
    2. Open Library medium cover built from the ISBN-13
    3. Open Library medium cover built from the ISBN-10

    URLs are built by formatting only; nothing is fetched.

    Args:
        image: Image URL supplied by the catalog
        isbn13: ISBN-13 of the record
        isbn10: ISBN-10 of the record

    Returns:
        Cover URL or None
    """
    direct = normalize_cover_url(image)
    if direct:
        return direct
    if isbn13:
        return isbn_cover_url(isbn13)
    if isbn10:
        return isbn_cover_url(isbn10)
    return None
