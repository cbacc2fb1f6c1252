"""Cover lookup for a bare title string.

Used when a book is picked without its search result (for example a title
typed by hand or recalled from a previous log entry), so there is no
structured record to take a cover from.
"""

import logging
from typing import Optional

from ..api.http import CatalogError
from ..api.isbndb import IsbndbClient
from ..api.openlibrary import (
    OpenLibraryClient,
    OpenLibraryDoc,
    id_cover_url,
    isbn_cover_url,
    olid_cover_url,
)
from .resolver import best_cover

logger = logging.getLogger(__name__)

TITLE_SEARCH_LIMIT = 10


def clean_title(raw_title: Optional[str]) -> str:
    """Strip a trailing ' by <author>' suffix and surrounding whitespace."""
    title = (raw_title or "").strip()
    head, sep, _author = title.rpartition(" by ")
    if sep:
        title = head.strip()
    return title


def _rank_key(doc: OpenLibraryDoc) -> tuple[int, int, int]:
    return (
        1 if doc.has_isbn else 0,
        doc.first_publish_year or 0,
        1 if doc.has_cover_id else 0,
    )


def rank_docs(docs: list[OpenLibraryDoc]) -> list[OpenLibraryDoc]:
    """Order search docs best-first.

    Docs with no usable identifier are dropped. Remaining docs are sorted by
    ISBN presence, then most recent first_publish_year, then cover ID
    presence. The sort is stable, so ties keep the catalog's order.
    """
    candidates = [doc for doc in docs if doc.is_identifiable()]
    return sorted(candidates, key=_rank_key, reverse=True)


def cover_from_doc(doc: OpenLibraryDoc) -> Optional[str]:
    """Derive a cover URL from a search doc: ISBN, then cover ID, then edition."""
    if doc.isbn:
        return isbn_cover_url(doc.isbn[0])
    if doc.has_cover_id:
        return id_cover_url(doc.cover_i)
    if doc.edition_key:
        return olid_cover_url(doc.edition_key[0])
    return None


class CoverSearchFallback:
    """Resolves a cover URL from a title via ISBNdb, then Open Library."""

    def __init__(self, primary: IsbndbClient, openlibrary: OpenLibraryClient):
        self.primary = primary
        self.openlibrary = openlibrary

    async def _primary_cover(self, title: str) -> Optional[str]:
        try:
            books = await self.primary.search_books(title, page_size=1)
        except CatalogError as e:
            logger.warning("ISBNdb cover lookup failed for %r: %s", title, e)
            return None
        if not books:
            return None
        book = books[0]
        return best_cover(book.image, book.isbn13, book.isbn)

    async def _openlibrary_cover(self, title: str) -> Optional[str]:
        try:
            docs = await self.openlibrary.search_title(title, limit=TITLE_SEARCH_LIMIT)
        except CatalogError as e:
            logger.warning("Open Library cover search failed for %r: %s", title, e)
            return None
        if not docs:
            return None

        ranked = rank_docs(docs)
        best = ranked[0] if ranked else docs[0]
        return cover_from_doc(best)

    async def resolve_cover_for_title(self, raw_title: Optional[str]) -> Optional[str]:
        """Find a cover URL for a title, possibly suffixed with ' by <author>'.

        Never raises; any failure is reported as None.

        Args:
            raw_title: Title as stored or typed

        Returns:
            Cover URL or None
        """
        title = clean_title(raw_title)
        if not title:
            return None

        try:
            cover = await self._primary_cover(title)
            if cover:
                return cover
            logger.debug("No ISBNdb cover for %r, trying Open Library", title)
            return await self._openlibrary_cover(title)
        except Exception as e:
            logger.warning("Cover lookup failed for %r: %s", title, e)
            return None
