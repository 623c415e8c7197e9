"""
Searcher configuration from the environment.
Module constants are read once at import; accessor functions re-read the environment.
"""

import os
from typing import List, Optional

from .errors import InvalidConfiguration

# Searcher selection and sizing
SEARCHER = os.getenv("PROJSEARCH_SEARCHER", "projection")  # projection|brute|faiss
PROJECTIONS = int(os.getenv("PROJSEARCH_PROJECTIONS", "8"))
SEARCH_SIZE = int(os.getenv("PROJSEARCH_SEARCH_SIZE", "10"))
DISTANCE = os.getenv("PROJSEARCH_DISTANCE", "euclidean")  # euclidean|squared_euclidean|manhattan|cosine
SEED = os.getenv("PROJSEARCH_SEED")  # unset means a fresh random basis per index

# Logging
LOG_LEVEL = os.getenv("PROJSEARCH_LOG_LEVEL", "INFO")

SEARCHERS = ("projection", "brute", "faiss")

# Version string
VERSION = "1.0.0"


def get_searcher_name() -> str:
    """Get configured searcher strategy (projection|brute|faiss)."""
    return os.getenv("PROJSEARCH_SEARCHER", "projection").lower()


def get_projections() -> int:
    """Get configured number of projections."""
    return _int_setting("PROJSEARCH_PROJECTIONS", "8")


def get_search_size() -> int:
    """Get configured per-projection search window."""
    return _int_setting("PROJSEARCH_SEARCH_SIZE", "10")


def get_distance_name() -> str:
    """Get configured distance measure name."""
    return os.getenv("PROJSEARCH_DISTANCE", "euclidean").lower()


def get_seed() -> Optional[int]:
    """Get configured basis seed, or None when unset."""
    value = os.getenv("PROJSEARCH_SEED")
    if value is None or value == "":
        return None
    return _int_setting("PROJSEARCH_SEED", value)


def get_log_level() -> str:
    """Get configured log level name."""
    return os.getenv("PROJSEARCH_LOG_LEVEL", "INFO").upper()


def validate_search_config() -> List[str]:
    """Validate searcher configuration and return any issues."""
    from ..vector.distance import DISTANCE_MEASURES

    issues = []

    searcher = get_searcher_name()
    if searcher not in SEARCHERS:
        issues.append(f"Invalid PROJSEARCH_SEARCHER: {searcher}")

    distance = get_distance_name()
    if distance not in DISTANCE_MEASURES:
        issues.append(f"Invalid PROJSEARCH_DISTANCE: {distance}")

    try:
        projections = get_projections()
        if searcher == "projection" and not 0 < projections < 100:
            issues.append("PROJSEARCH_PROJECTIONS must be between 1 and 99")
    except InvalidConfiguration as exc:
        issues.append(str(exc))

    try:
        if get_search_size() < 0:
            issues.append("PROJSEARCH_SEARCH_SIZE must be >= 0")
    except InvalidConfiguration as exc:
        issues.append(str(exc))

    try:
        get_seed()
    except InvalidConfiguration as exc:
        issues.append(str(exc))

    if searcher == "faiss" and distance not in ("euclidean", "squared_euclidean"):
        issues.append("PROJSEARCH_SEARCHER=faiss requires a euclidean PROJSEARCH_DISTANCE")

    return issues


def get_searcher(dimension: int):
    """Get configured searcher implementation for vectors of the given dimension."""
    issues = validate_search_config()
    if issues:
        raise InvalidConfiguration(f"Searcher configuration invalid: {issues}")

    from ..vector.distance import get_distance_measure
    distance = get_distance_measure(get_distance_name())
    searcher = get_searcher_name()

    if searcher == "brute":
        from ..vector.index import BruteSearch
        return BruteSearch(dimension, distance, search_size=get_search_size())
    elif searcher == "faiss":
        from ..vector.faiss_store import FaissSearch
        return FaissSearch(dimension, distance, search_size=get_search_size())
    else:
        from ..vector.projection import ProjectionSearch
        return ProjectionSearch(dimension, distance, get_projections(), get_search_size(),
                                seed=get_seed())


def _int_setting(name: str, value: str) -> int:
    raw = os.getenv(name, value)
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer: {raw}") from None
