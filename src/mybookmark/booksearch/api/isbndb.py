"""ISBNdb API client, the primary book catalog.

ISBNdb (api2.isbndb.com) provides:
- General title/keyword search (/books/{query})
- Author search (/author/{query})

Requires an API key sent in the Authorization header. The base URL is
configurable so requests can go through a proxy that adds the key instead.
"""

import logging
from typing import Optional
from urllib.parse import quote

from pydantic import Field, ValidationError

from .http import CatalogHttp, CatalogNotFoundError, CatalogUnavailableError
from .models import CatalogModel

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api2.isbndb.com"


class IsbndbBook(CatalogModel):
    """A book record as returned by ISBNdb."""

    title: Optional[str] = None
    authors: list[str] = Field(default_factory=list)
    image: Optional[str] = None
    isbn13: Optional[str] = None
    isbn: Optional[str] = None  # ISBN-10
    synopsis: Optional[str] = None
    overview: Optional[str] = None


class IsbndbResponse(CatalogModel):
    """Envelope shared by the books and author endpoints."""

    books: list[IsbndbBook] = Field(default_factory=list)


class IsbndbClient:
    """Client for ISBNdb API."""

    def __init__(
        self,
        http: CatalogHttp,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        language: str = "en",
    ):
        """Initialize client.

        Args:
            http: Shared transport
            api_key: ISBNdb key, omitted when a proxy supplies it
            base_url: API root or proxy root
            language: Result language filter
        """
        self.http = http
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language

    def _headers(self) -> Optional[dict]:
        if self.api_key:
            return {"Authorization": self.api_key}
        return None

    async def _search(self, endpoint: str, query: str, page_size: int) -> list[IsbndbBook]:
        url = f"{self.base_url}/{endpoint}/{quote(query, safe='')}"
        params = {"pageSize": page_size, "language": self.language}
        try:
            data = await self.http.get_json(url, params=params, headers=self._headers())
        except CatalogNotFoundError:
            # ISBNdb answers 404 when nothing matches
            logger.debug("No ISBNdb %s match for %r", endpoint, query)
            return []
        try:
            return IsbndbResponse.model_validate(data).books
        except ValidationError as e:
            raise CatalogUnavailableError(f"Malformed ISBNdb response: {e}")

    async def search_books(self, query: str, page_size: int = 8) -> list[IsbndbBook]:
        """Search books by title, keyword or ISBN.

        Args:
            query: Raw search text
            page_size: Maximum records to return

        Returns:
            List of IsbndbBook records (possibly empty)
        """
        return await self._search("books", query, page_size)

    async def search_author(self, query: str, page_size: int = 8) -> list[IsbndbBook]:
        """Search books credited to an author name.

        Args:
            query: Author name
            page_size: Maximum records to return

        Returns:
            List of IsbndbBook records (possibly empty)
        """
        return await self._search("author", query, page_size)
