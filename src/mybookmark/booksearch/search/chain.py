"""Cascading book search across catalog providers."""

import logging
from typing import Sequence

from ..api.http import CatalogError
from ..schemas import BookCandidate
from .providers import Provider

logger = logging.getLogger(__name__)

MIN_RESULTS = 1
MAX_RESULTS = 12


def clamp_max_results(max_results: int) -> int:
    """Keep a requested page size within what the catalogs accept."""
    return max(MIN_RESULTS, min(MAX_RESULTS, int(max_results)))


class ProviderChain:
    """Queries providers in order; the first non-empty answer wins.

    Results from different providers are never merged. A provider that fails
    is treated like one that found nothing.
    """

    def __init__(self, providers: Sequence[Provider]):
        self.providers = tuple(providers)

    async def search(self, query: str, max_results: int = 8) -> list[BookCandidate]:
        """Search for books.

        Never raises; an exhausted chain returns an empty list.

        Args:
            query: Raw search text
            max_results: Page size, clamped to 1..12

        Returns:
            List of BookCandidate (possibly empty)
        """
        query = (query or "").strip()
        if not query:
            return []

        try:
            limit = clamp_max_results(max_results)
        except (TypeError, ValueError):
            limit = 8

        for provider in self.providers:
            try:
                results = await provider.search(query, limit)
            except CatalogError as e:
                logger.warning("%s provider unavailable for %r: %s", provider.name, query, e)
                continue
            except Exception:
                logger.warning("%s provider crashed for %r", provider.name, query, exc_info=True)
                continue

            if results:
                logger.debug("%s provider answered %r with %d results", provider.name, query, len(results))
                return results[:limit]
            logger.debug("%s provider found nothing for %r", provider.name, query)

        return []
