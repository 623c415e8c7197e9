"""
Approximate nearest neighbour search over random projections.
"""

from .core.config import VERSION, get_searcher
from .core.errors import DimensionMismatch, InvalidArgument, InvalidConfiguration, SearchError
from .vector import (
    BruteSearch,
    ISearcher,
    ProjectionSearch,
    QueryResult,
    WeightedVector,
)

__version__ = VERSION

__all__ = [
    'BruteSearch',
    'DimensionMismatch',
    'ISearcher',
    'InvalidArgument',
    'InvalidConfiguration',
    'ProjectionSearch',
    'QueryResult',
    'SearchError',
    'WeightedVector',
    'get_searcher'
]
