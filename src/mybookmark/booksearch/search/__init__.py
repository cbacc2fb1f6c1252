"""Book search: query classification, provider cascade and input sessions."""

from .chain import ProviderChain, clamp_max_results
from .classifier import classify
from .profiles import PROFILES, SearchProfile, get_profile
from .providers import (
    CuratedProvider,
    PrimaryProvider,
    Provider,
    SecondaryProvider,
    isbndb_to_candidate,
    volume_to_candidate,
)
from .session import SearchSession

__all__ = [
    "CuratedProvider",
    "PROFILES",
    "PrimaryProvider",
    "Provider",
    "ProviderChain",
    "SearchProfile",
    "SearchSession",
    "SecondaryProvider",
    "clamp_max_results",
    "classify",
    "get_profile",
    "isbndb_to_candidate",
    "volume_to_candidate",
]
