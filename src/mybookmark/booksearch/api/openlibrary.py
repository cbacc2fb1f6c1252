"""Open Library API client for cover lookup.

Open Library (openlibrary.org) provides:
- Search by title
- Cover images addressable by ISBN, cover ID or edition OLID

No API key required.
"""

from typing import Optional

from pydantic import Field, ValidationError

from .http import CatalogHttp, CatalogUnavailableError
from .models import CatalogModel

BASE_URL = "https://openlibrary.org"
COVERS_URL = "https://covers.openlibrary.org"

COVER_SIZES = ("S", "M", "L")


def _cover_url(key_type: str, value, size: str) -> str:
    if size not in COVER_SIZES:
        raise ValueError(f"Cover size must be one of {COVER_SIZES}, got {size!r}")
    return f"{COVERS_URL}/b/{key_type}/{value}-{size}.jpg"


def isbn_cover_url(isbn: str, size: str = "M") -> str:
    """Build a cover URL from an ISBN-10 or ISBN-13."""
    return _cover_url("isbn", isbn, size)


def id_cover_url(cover_id: int, size: str = "M") -> str:
    """Build a cover URL from a numeric Open Library cover ID."""
    return _cover_url("id", cover_id, size)


def olid_cover_url(olid: str, size: str = "M") -> str:
    """Build a cover URL from an edition key (e.g., OL123456M)."""
    return _cover_url("olid", olid, size)


class OpenLibraryDoc(CatalogModel):
    """A search document from Open Library."""

    key: Optional[str] = None  # e.g. "/works/OL123456W"
    title: Optional[str] = None
    isbn: list[str] = Field(default_factory=list)
    cover_i: Optional[int] = None
    edition_key: list[str] = Field(default_factory=list)
    first_publish_year: Optional[int] = None

    @property
    def has_isbn(self) -> bool:
        return bool(self.isbn)

    @property
    def has_cover_id(self) -> bool:
        # Open Library reports a missing cover as -1 on some records
        return self.cover_i is not None and self.cover_i > 0

    def is_identifiable(self) -> bool:
        """Check the doc carries anything a cover can be derived from."""
        return bool(self.has_cover_id or self.isbn or self.edition_key or self.key)


class SearchResponse(CatalogModel):
    numFound: int = 0
    docs: list[OpenLibraryDoc] = Field(default_factory=list)


class OpenLibraryClient:
    """Client for Open Library search API."""

    def __init__(self, http: CatalogHttp):
        self.http = http

    async def search_title(self, title: str, limit: int = 10) -> list[OpenLibraryDoc]:
        """Search for books by title.

        Args:
            title: Book title to search
            limit: Maximum results

        Returns:
            List of OpenLibraryDoc objects
        """
        params = {
            "title": title,
            "limit": limit,
        }

        url = f"{BASE_URL}/search.json"
        data = await self.http.get_json(url, params=params)
        try:
            return SearchResponse.model_validate(data).docs
        except ValidationError as e:
            raise CatalogUnavailableError(f"Malformed Open Library response: {e}")
