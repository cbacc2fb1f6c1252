"""Book search service.

Wires the catalog clients, provider chain and cover fallback together over
one HTTP session. This is the entry point call sites use:

    async with BookSearchService() as books:
        results = await books.search("Charlotte's Web")
        cover = await books.resolve_cover("Matilda by Roald Dahl")
"""

import logging
from typing import Optional

from .api.google_books import GoogleBooksClient
from .api.http import CatalogHttp
from .api.isbndb import IsbndbClient
from .api.openlibrary import OpenLibraryClient
from .config import Config, get_config
from .covers.fallback import CoverSearchFallback
from .curated import CuratedCatalog
from .schemas import BookCandidate, QueryKind
from .search.chain import ProviderChain
from .search.classifier import classify
from .search.profiles import get_profile
from .search.providers import CuratedProvider, PrimaryProvider, Provider, SecondaryProvider
from .search.session import ResultsCallback, SearchSession

logger = logging.getLogger(__name__)


class BookSearchService:
    """Facade over the book metadata pipeline."""

    def __init__(
        self,
        config: Optional[Config] = None,
        catalog: Optional[CuratedCatalog] = None,
        http: Optional[CatalogHttp] = None,
        offline: bool = False,
    ):
        """Initialize service.

        Args:
            config: Configuration (default: from environment)
            catalog: Curated shelves (default: built-in shelves)
            http: Transport to share (default: a new one)
            offline: Search curated shelves only, never the network
        """
        self.config = config or get_config()
        self.catalog = catalog or CuratedCatalog()
        self.http = http or CatalogHttp(timeout=self.config.timeout)
        self.offline = offline

        self.isbndb = IsbndbClient(
            self.http,
            api_key=self.config.isbndb_api_key,
            base_url=self.config.primary_base_url,
        )
        self.google_books = GoogleBooksClient(
            self.http, api_key=self.config.google_books_api_key
        )
        self.openlibrary = OpenLibraryClient(self.http)

        self.chain = ProviderChain(self._build_providers())
        self.covers = CoverSearchFallback(self.isbndb, self.openlibrary)

    def _build_providers(self) -> list[Provider]:
        curated = CuratedProvider(self.catalog)
        if self.offline:
            return [curated]

        providers: list[Provider] = [
            PrimaryProvider(self.isbndb),
            SecondaryProvider(self.google_books),
        ]
        if self.config.offline_fallback:
            providers.append(curated)
        return providers

    async def __aenter__(self) -> "BookSearchService":
        await self.http.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the HTTP session."""
        await self.http.close()

    def classify(self, query: str) -> QueryKind:
        """Classify a raw query."""
        return classify(query)

    async def search(self, query: str, max_results: int = 8) -> list[BookCandidate]:
        """Search for books. Never raises; no match is an empty list."""
        return await self.chain.search(query, max_results)

    async def resolve_cover(self, title: str) -> Optional[str]:
        """Find a cover for a bare title. Never raises."""
        return await self.covers.resolve_cover_for_title(title)

    async def _cover_as_list(self, title: str) -> list[str]:
        url = await self.covers.resolve_cover_for_title(title)
        return [url] if url else []

    def session(
        self,
        profile_name: str = "log_session",
        on_results: Optional[ResultsCallback] = None,
    ) -> SearchSession:
        """Create a search session for an input field.

        The 'cover' profile yields a session whose results are [cover_url]
        or an empty list.

        Raises:
            KeyError: If the profile is unknown
        """
        profile = get_profile(profile_name)

        if profile.covers_only:
            fetch = self._cover_as_list
        else:
            async def fetch(query: str) -> list[BookCandidate]:
                return await self.chain.search(query, profile.max_results)

        return SearchSession(
            fetch,
            delay=profile.delay,
            min_length=profile.min_length,
            on_results=on_results,
        )
