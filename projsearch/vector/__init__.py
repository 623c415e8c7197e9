"""
Searchers, distance measures and the value types they share.
FaissSearch is imported from .faiss_store so that faiss stays a lazy import.
"""

from .index import ISearcher, BruteSearch
from .projection import ProjectionSearch
from .types import WeightedVector, QueryResult, as_vector
from .distance import (
    IDistanceMeasure,
    EuclideanDistance,
    SquaredEuclideanDistance,
    ManhattanDistance,
    CosineDistance,
    get_distance_measure
)

__all__ = [
    'ISearcher',
    'BruteSearch',
    'ProjectionSearch',
    'WeightedVector',
    'QueryResult',
    'as_vector',
    'IDistanceMeasure',
    'EuclideanDistance',
    'SquaredEuclideanDistance',
    'ManhattanDistance',
    'CosineDistance',
    'get_distance_measure'
]
