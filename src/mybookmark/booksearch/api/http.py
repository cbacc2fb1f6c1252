"""Shared async HTTP transport for catalog clients."""

import asyncio
import logging
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)

USER_AGENT = "MyBookmark-BookSearch/1.0"


class CatalogError(Exception):
    """Base exception for catalog API errors."""

    pass


class CatalogUnavailableError(CatalogError):
    """Raised on transport failures, bad statuses and undecodable bodies."""

    pass


class CatalogNotFoundError(CatalogUnavailableError):
    """Raised when a catalog answers 404."""

    pass


class CatalogHttp:
    """Owns one aiohttp session shared by every catalog client."""

    def __init__(self, timeout: float = 10):
        """Initialize transport.

        Args:
            timeout: Total request timeout in seconds
        """
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "CatalogHttp":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def open(self) -> None:
        """Create the underlying client session if needed."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": USER_AGENT},
            )

    async def close(self) -> None:
        """Close the underlying client session."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def get_json(
        self,
        url: str,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
    ) -> dict:
        """Make GET request and decode the JSON body.

        Raises:
            CatalogUnavailableError: On any transport, status or decode failure
        """
        await self.open()
        try:
            async with self._session.get(url, params=params, headers=headers) as response:
                if response.status == 404:
                    raise CatalogNotFoundError(f"HTTP error 404 from {url}")
                if response.status >= 400:
                    raise CatalogUnavailableError(
                        f"HTTP error {response.status} from {url}"
                    )
                data = await response.json(content_type=None)
        except asyncio.TimeoutError:
            raise CatalogUnavailableError(f"Request to {url} timed out")
        except aiohttp.ClientError as e:
            raise CatalogUnavailableError(f"Request to {url} failed: {e}")
        except ValueError as e:
            raise CatalogUnavailableError(f"Invalid JSON from {url}: {e}")

        if not isinstance(data, dict):
            raise CatalogUnavailableError(f"Unexpected payload from {url}")
        return data
