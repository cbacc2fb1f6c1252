"""Book metadata search for MyBookmark.

Turns free-text queries or bare titles into normalized book records with
covers, cascading across ISBNdb, Google Books and Open Library.
"""

__version__ = "0.1.0"

from .schemas import BookCandidate, CandidateSource, QueryKind, SessionStatus
from .service import BookSearchService

__all__ = [
    "BookCandidate",
    "BookSearchService",
    "CandidateSource",
    "QueryKind",
    "SessionStatus",
    "__version__",
]
