"""Pydantic schemas for book search.

These schemas define the normalized record every catalog provider produces
(BookCandidate) along with the enums shared across the search pipeline.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DESCRIPTION_MAX_LENGTH = 120

# Substrings that mark a catalog's "no cover" stand-in image
PLACEHOLDER_MARKERS = ("image_not_available",)


class QueryKind(str, Enum):
    """Heuristic category of a raw search string."""

    ISBN = "isbn"
    AUTHOR_NAME = "author_name"
    GENERAL = "general"


class CandidateSource(str, Enum):
    """Catalog that produced a candidate."""

    PRIMARY = "primary"  # ISBNdb
    SECONDARY = "secondary"  # Google Books
    CURATED = "curated"  # Offline shelves


class SessionStatus(str, Enum):
    """Lifecycle state of an interactive search session."""

    IDLE = "idle"
    DEBOUNCING = "debouncing"
    IN_FLIGHT = "in_flight"
    RESOLVED = "resolved"
    FAILED = "failed"


def is_placeholder_image(url: str) -> bool:
    """Check whether an image URL is a known 'not available' placeholder."""
    lowered = url.lower()
    return any(marker in lowered for marker in PLACEHOLDER_MARKERS)


def normalize_cover_url(url: Optional[str]) -> Optional[str]:
    """Return an absolute https cover URL, or None if the URL is unusable.

    Plain http URLs are upgraded to https. Relative paths, other schemes and
    placeholder images are rejected.
    """
    if not url:
        return None
    url = url.strip()
    if url.startswith("http://"):
        url = "https://" + url[len("http://"):]
    if not url.startswith("https://") or len(url) <= len("https://"):
        return None
    if is_placeholder_image(url):
        return None
    return url


class BookCandidate(BaseModel):
    """A normalized book record produced by a catalog provider."""

    title: str = Field(default="Unknown", description="Book title")
    author: str = Field(default="", description="First credited author")
    cover_url: Optional[str] = Field(None, description="Absolute https cover URL")
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    isbn13: Optional[str] = None
    isbn10: Optional[str] = None
    source: Optional[CandidateSource] = None

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v):
        if v is None or not str(v).strip():
            return "Unknown"
        return str(v).strip()

    @field_validator("author", mode="before")
    @classmethod
    def default_author(cls, v):
        return str(v).strip() if v else ""

    @field_validator("description", mode="before")
    @classmethod
    def truncate_description(cls, v):
        if not v:
            return ""
        return str(v)[:DESCRIPTION_MAX_LENGTH]

    @field_validator("cover_url", mode="before")
    @classmethod
    def check_cover_url(cls, v):
        return normalize_cover_url(v)

    @field_validator("isbn13", "isbn10", mode="before")
    @classmethod
    def blank_isbn_to_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    def display_title(self) -> str:
        """Format as 'Title by Author', the form stored when a book is picked."""
        if self.author:
            return f"{self.title} by {self.author}"
        return self.title
