"""Pytest configuration and shared fixtures.

This module provides fixtures for testing booksearch, including a fake
catalog transport and sample catalog payloads. No test touches the network.
"""

import asyncio
import os
from typing import Callable, Generator

import pytest

from mybookmark.booksearch.api.http import CatalogUnavailableError
from mybookmark.booksearch.config import Config, reset_config


# ============================================================================
# Transport Fixtures
# ============================================================================


class FakeHttp:
    """Stands in for CatalogHttp, answering by URL fragment.

    A route value may be a payload dict or an exception instance to raise.
    Unrouted URLs fail like an unreachable catalog.
    """

    def __init__(self, routes: dict = None):
        self.routes = dict(routes or {})
        self.calls: list[tuple[str, dict, dict]] = []
        self.opened = False
        self.closed = False

    async def open(self) -> None:
        self.opened = True

    async def close(self) -> None:
        self.closed = True

    async def get_json(self, url: str, params: dict = None, headers: dict = None) -> dict:
        self.calls.append((url, params or {}, headers or {}))
        for fragment, response in self.routes.items():
            if fragment in url:
                if isinstance(response, Exception):
                    raise response
                return response
        raise CatalogUnavailableError(f"No route for {url}")

    def calls_to(self, fragment: str) -> list[tuple[str, dict, dict]]:
        return [call for call in self.calls if fragment in call[0]]


@pytest.fixture
def fake_http() -> FakeHttp:
    """Create a fake transport with no routes."""
    return FakeHttp()


@pytest.fixture
def run() -> Callable:
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    """Reset global config and booksearch environment variables."""
    names = [
        "ISBNDB_API_KEY",
        "BOOKSEARCH_PRIMARY_URL",
        "GOOGLE_BOOKS_API_KEY",
        "BOOKSEARCH_TIMEOUT",
        "BOOKSEARCH_OFFLINE_FALLBACK",
        "BOOKSEARCH_LOG_LEVEL",
    ]
    saved = {name: os.environ.pop(name, None) for name in names}
    reset_config()

    yield

    reset_config()
    for name, value in saved.items():
        os.environ.pop(name, None)
        if value is not None:
            os.environ[name] = value


@pytest.fixture
def config() -> Config:
    """Create a config with test keys."""
    return Config(
        isbndb_api_key="test-isbndb-key",
        primary_base_url="https://api2.isbndb.com",
        google_books_api_key=None,
        timeout=5,
        offline_fallback=False,
        log_level="WARNING",
    )


# ============================================================================
# Sample Payload Fixtures
# ============================================================================


@pytest.fixture
def isbndb_payload() -> dict:
    """ISBNdb /books response with two records."""
    return {
        "total": 2,
        "books": [
            {
                "title": "Charlotte's Web",
                "authors": ["E. B. White", "Garth Williams"],
                "image": "https://images.isbndb.com/covers/05/58/9780064400558.jpg",
                "isbn13": "9780064400558",
                "isbn": "0064400557",
                "synopsis": "This beloved book by E. B. White tells the story of a pig named "
                "Wilbur and his friendship with a barn spider named Charlotte. " * 2,
            },
            {
                "title": "Charlotte's Web (Full Color)",
                "authors": ["E. B. White"],
                "isbn13": "9780061124952",
                "overview": "Full color edition.",
            },
        ],
    }


@pytest.fixture
def google_payload() -> dict:
    """Google Books volumes response with one volume."""
    return {
        "kind": "books#volumes",
        "totalItems": 1,
        "items": [
            {
                "volumeInfo": {
                    "title": "Matilda",
                    "authors": ["Roald Dahl"],
                    "description": "Matilda is a little girl who is far too good to be true.",
                    "imageLinks": {
                        "thumbnail": "http://books.google.com/books/content?id=abc&printsec=frontcover&img=1",
                    },
                    "industryIdentifiers": [
                        {"type": "ISBN_10", "identifier": "0142410373"},
                        {"type": "ISBN_13", "identifier": "9780142410370"},
                    ],
                }
            }
        ],
    }


@pytest.fixture
def openlibrary_payload() -> dict:
    """Open Library search.json response."""
    return {
        "numFound": 3,
        "docs": [
            {"key": "/works/OL1W", "title": "Holes", "cover_i": 111, "first_publish_year": 2010},
            {
                "key": "/works/OL2W",
                "title": "Holes",
                "isbn": ["9780374332662", "0374332657"],
                "edition_key": ["OL2M"],
                "first_publish_year": 1998,
            },
            {"key": "/works/OL3W", "title": "Holes", "edition_key": ["OL3M"]},
        ],
    }
