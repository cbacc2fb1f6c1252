"""API module for external book catalog services.

Provides async clients for the primary (ISBNdb), secondary (Google Books)
and cover (Open Library) catalogs over one shared transport.
"""

from .google_books import GoogleBooksClient, GoogleVolume
from .http import CatalogError, CatalogHttp, CatalogNotFoundError, CatalogUnavailableError
from .isbndb import IsbndbBook, IsbndbClient
from .openlibrary import (
    OpenLibraryClient,
    OpenLibraryDoc,
    id_cover_url,
    isbn_cover_url,
    olid_cover_url,
)

__all__ = [
    "CatalogError",
    "CatalogHttp",
    "CatalogNotFoundError",
    "CatalogUnavailableError",
    "GoogleBooksClient",
    "GoogleVolume",
    "IsbndbBook",
    "IsbndbClient",
    "OpenLibraryClient",
    "OpenLibraryDoc",
    "id_cover_url",
    "isbn_cover_url",
    "olid_cover_url",
]
