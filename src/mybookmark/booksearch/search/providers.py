"""Catalog providers that normalize their results into BookCandidate."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..api.google_books import GoogleBooksClient, GoogleVolume
from ..api.http import CatalogError
from ..api.isbndb import IsbndbBook, IsbndbClient
from ..covers.resolver import best_cover
from ..curated import CuratedCatalog
from ..schemas import BookCandidate, CandidateSource, QueryKind
from .classifier import classify

logger = logging.getLogger(__name__)


class Provider(ABC):
    """A catalog that can answer a search query."""

    source: CandidateSource

    @abstractmethod
    async def search(self, query: str, max_results: int) -> list[BookCandidate]:
        """Search the catalog.

        Raises:
            CatalogError: If the catalog could not be queried
        """

    @property
    def name(self) -> str:
        return self.source.value


def isbndb_to_candidate(book: IsbndbBook) -> BookCandidate:
    """Convert an ISBNdb record to a BookCandidate."""
    return BookCandidate(
        title=book.title,
        author=book.authors[0] if book.authors else "",
        cover_url=best_cover(book.image, book.isbn13, book.isbn),
        description=book.synopsis or book.overview or "",
        isbn13=book.isbn13,
        isbn10=book.isbn,
        source=CandidateSource.PRIMARY,
    )


def volume_to_candidate(volume: GoogleVolume) -> BookCandidate:
    """Convert a Google Books volume to a BookCandidate."""
    info = volume.volumeInfo
    isbn13 = info.identifier("ISBN_13")
    isbn10 = info.identifier("ISBN_10")

    thumbnail = info.imageLinks.thumbnail if info.imageLinks else None
    if thumbnail:
        thumbnail = thumbnail.replace("http:", "https:", 1)

    return BookCandidate(
        title=info.title,
        author=info.authors[0] if info.authors else "",
        cover_url=best_cover(thumbnail, isbn13, isbn10),
        description=info.description or "",
        isbn13=isbn13,
        isbn10=isbn10,
        source=CandidateSource.SECONDARY,
    )


class PrimaryProvider(Provider):
    """ISBNdb: general search, then author search for name-like queries."""

    source = CandidateSource.PRIMARY

    def __init__(self, client: IsbndbClient):
        self.client = client

    async def search(self, query: str, max_results: int) -> list[BookCandidate]:
        books: list[IsbndbBook] = []
        error: Optional[CatalogError] = None

        try:
            books = await self.client.search_books(query, page_size=max_results)
        except CatalogError as e:
            logger.warning("ISBNdb books search failed for %r: %s", query, e)
            error = e

        if not books and classify(query) == QueryKind.AUTHOR_NAME:
            logger.debug("No ISBNdb title hits for %r, trying author search", query)
            try:
                books = await self.client.search_author(query, page_size=max_results)
                error = None
            except CatalogError as e:
                logger.warning("ISBNdb author search failed for %r: %s", query, e)
                error = e

        if not books and error is not None:
            raise error

        return [isbndb_to_candidate(b) for b in books[:max_results]]


class SecondaryProvider(Provider):
    """Google Books volumes search."""

    source = CandidateSource.SECONDARY

    def __init__(self, client: GoogleBooksClient):
        self.client = client

    async def search(self, query: str, max_results: int) -> list[BookCandidate]:
        volumes = await self.client.search_volumes(query, max_results=max_results)
        return [volume_to_candidate(v) for v in volumes[:max_results]]


class CuratedProvider(Provider):
    """Offline provider matching against the curated shelves."""

    source = CandidateSource.CURATED

    def __init__(self, catalog: CuratedCatalog):
        self.catalog = catalog

    async def search(self, query: str, max_results: int) -> list[BookCandidate]:
        return [b.to_candidate() for b in self.catalog.find(query)[:max_results]]
