"""Cover image resolution."""

from .fallback import CoverSearchFallback, clean_title, cover_from_doc, rank_docs
from .resolver import best_cover

__all__ = [
    "CoverSearchFallback",
    "best_cover",
    "clean_title",
    "cover_from_doc",
    "rank_docs",
]
