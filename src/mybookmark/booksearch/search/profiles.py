"""Search settings for each place the app searches from."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class SearchProfile:
    """Debounce and page size for one call site."""

    name: str
    delay: float  # seconds
    max_results: int
    min_length: int = 2
    covers_only: bool = False


PROFILES: Mapping[str, SearchProfile] = MappingProxyType({
    "log_session": SearchProfile("log_session", delay=0.3, max_results=8),
    "reading_list": SearchProfile("reading_list", delay=0.4, max_results=6),
    "discover": SearchProfile("discover", delay=0.0, max_results=12),
    # Cover lookup for a typed title, only once it is reasonably complete
    "cover": SearchProfile("cover", delay=0.8, max_results=1, min_length=4, covers_only=True),
})


def get_profile(name: str) -> SearchProfile:
    """Look up a profile by name.

    Raises:
        KeyError: If the profile is unknown
    """
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(f"Unknown search profile: {name}. Choose from {', '.join(PROFILES)}")
