"""
Searcher contract shared by every index strategy, plus the exact brute-force searcher.
"""

import operator
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..core.errors import DimensionMismatch, InvalidArgument, InvalidConfiguration
from ..util.logging import logger
from .distance import IDistanceMeasure
from .types import QueryResult, as_vector


class ISearcher(ABC):
    """Abstract interface for nearest neighbour searchers.

    Implementations are chosen by the caller at construction time. They share
    validation, result ranking and the convenience operations defined here.
    """

    def __init__(self, dimension: int, distance_measure: IDistanceMeasure, search_size: int):
        dimension = self._count("index.create", "Dimension", dimension, 1, InvalidConfiguration)
        search_size = self._count("index.create", "Search size", search_size, 0, InvalidConfiguration)

        self.dimension = dimension
        self._distance = distance_measure
        self._search_size = search_size
        self._lock = threading.Lock()

    @abstractmethod
    def add(self, vector: Any) -> None:
        """Add a single vector to the index."""
        pass

    @abstractmethod
    def search(self, query: Any, n: int) -> List[QueryResult]:
        """Return up to n results ordered by ascending distance from the query."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Number of vectors in the index."""
        pass

    def batch_add(self, vectors: Iterable[Any]) -> None:
        """Add multiple vectors. All are validated before any is inserted."""
        validated = [self._data_vector(vector) for vector in vectors]
        for vector in validated:
            self.add(vector)

    def search_first(self, query: Any) -> Optional[QueryResult]:
        """Return the single closest result, or None when the index is empty."""
        results = self.search(query, 1)
        return results[0] if results else None

    def get_search_size(self) -> int:
        return self._search_size

    def set_search_size(self, search_size: int) -> None:
        """Change the search window. Applies from the next search on."""
        self._search_size = self._count("index.set_search_size", "Search size", search_size, 0,
                                        InvalidArgument)

    @property
    def distance_measure(self) -> IDistanceMeasure:
        return self._distance

    def __len__(self) -> int:
        return self.size()

    # Internal -------------------------------------------------------------
    def _reject(self, operation: str, error: Exception):
        logger.log_rejected(operation, error, {"searcher": type(self).__name__})
        raise error

    def _count(self, operation: str, label: str, value: Any, minimum: int, error) -> int:
        """Return value as an int no smaller than minimum, rejecting anything else."""
        try:
            count = operator.index(value)
        except TypeError:
            self._reject(operation, error(f"{label} must be an integer: {value!r}"))
        if count < minimum:
            self._reject(operation, error(f"{label} must be >= {minimum}: {count}"))
        return count

    def _data_vector(self, vector: Any, operation: str = "vector.add") -> np.ndarray:
        try:
            return as_vector(vector, self.dimension)
        except DimensionMismatch as exc:
            self._reject(operation, exc)

    def _validate_query(self, query: Any, n: int) -> Tuple[np.ndarray, int]:
        n = self._count("search", "Number of results", n, 1, InvalidArgument)
        return self._data_vector(query, operation="search"), n

    def _rank(self, query: np.ndarray, candidates: Dict[int, np.ndarray], n: int) -> List[QueryResult]:
        """Exactly rank candidates by distance, ties broken by insertion key."""
        results = [
            QueryResult(key=key, vector=vector, distance=self._distance.distance(query, vector))
            for key, vector in candidates.items()
        ]
        results.sort(key=lambda result: (result.distance, result.key))
        return results[:n]


class BruteSearch(ISearcher):
    """Exact search by scanning every stored vector.

    The search size is kept so the searcher satisfies the contract, but it
    has no effect on results.
    """

    def __init__(self, dimension: int, distance_measure: IDistanceMeasure, search_size: int = 10):
        super().__init__(dimension, distance_measure, search_size)
        self._vectors: List[np.ndarray] = []
        logger.log_index_created("brute", dimension, {"distance": distance_measure.name})

    def add(self, vector: Any) -> None:
        """Add a single vector to the index."""
        vector = self._data_vector(vector)
        with self._lock:
            key = len(self._vectors)
            self._vectors.append(vector)
        logger.log_vector_operation("add", key, {"searcher": "brute"})

    def search(self, query: Any, n: int) -> List[QueryResult]:
        """Rank every stored vector and return the n closest."""
        query, n = self._validate_query(query, n)
        start = time.perf_counter()
        with self._lock:
            candidates = dict(enumerate(self._vectors))

        results = self._rank(query, candidates, n)
        logger.log_search("brute", n, len(candidates), len(results),
                          (time.perf_counter() - start) * 1000)
        return results

    def size(self) -> int:
        return len(self._vectors)
