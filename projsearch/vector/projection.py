"""
Approximate nearest neighbour search by projecting the data onto random directions.

Every stored vector is kept in one sorted container per basis vector, ordered
by its projection onto that basis. A search scans a window around the query's
projected position in each container, unions what it finds, and ranks the
union exactly.
"""

import bisect
import time
from typing import Any, Dict, List, Optional

import numpy as np

from ..core.errors import InvalidConfiguration
from ..util.logging import logger
from .distance import IDistanceMeasure
from .index import ISearcher
from .types import QueryResult, WeightedVector

MAX_PROJECTIONS = 100


class ProjectionSearch(ISearcher):
    """Random-projection searcher.

    Args:
        dimension: Dimension of every vector added or queried
        distance_measure: Measure used for the final exact ranking
        projections: Number of random basis vectors, 0 < projections < 100
        search_size: Entries harvested on each side of the query per projection
        seed: Optional seed making the basis reproducible
    """

    def __init__(self, dimension: int, distance_measure: IDistanceMeasure, projections: int,
                 search_size: int, seed: Optional[int] = None):
        projections = self._count("index.create", "Number of projections", projections, 1,
                                  InvalidConfiguration)
        if projections >= MAX_PROJECTIONS:
            self._reject("index.create", InvalidConfiguration(
                f"Unreasonable value for number of projections: {projections}"))
        super().__init__(dimension, distance_measure, search_size)

        # Standard normal components give directions uniform on the sphere
        rng = np.random.default_rng(seed)
        basis = rng.standard_normal((projections, self.dimension))
        basis /= np.linalg.norm(basis, axis=1, keepdims=True)
        basis.flags.writeable = False
        self._basis = basis

        # One container per basis vector, index-aligned with the basis rows
        self._containers: List[List[WeightedVector]] = [[] for _ in range(projections)]
        self._next_key = 0

        logger.log_index_created("projection", self.dimension, {
            "distance": distance_measure.name,
            "projections": projections,
            "search_size": self._search_size,
            "seed": seed
        })

    def add(self, vector: Any) -> None:
        """Insert a vector into every projection container."""
        vector = self._data_vector(vector)
        weights = self._basis @ vector

        with self._lock:
            key = self._next_key
            self._next_key += 1
            for container, weight in zip(self._containers, weights):
                bisect.insort(container, WeightedVector(float(weight), key, vector))

        logger.log_vector_operation("add", key, {"searcher": "projection"})

    def search(self, query: Any, n: int) -> List[QueryResult]:
        """Return up to n approximate nearest neighbours, exactly ranked.

        Fewer than n results come back when the projection windows found fewer
        candidates than requested.
        """
        query, n = self._validate_query(query, n)
        start = time.perf_counter()
        with self._lock:
            candidates = self._harvest(query)

        results = self._rank(query, candidates, n)
        logger.log_search("projection", n, len(candidates), len(results),
                          (time.perf_counter() - start) * 1000)
        return results

    def candidates(self, query: Any) -> Dict[int, np.ndarray]:
        """Return the candidate set a search for this query would rank, keyed by insertion key."""
        query = self._data_vector(query, operation="search")
        with self._lock:
            return self._harvest(query)

    def size(self) -> int:
        return len(self._containers[0])

    @property
    def projections(self) -> int:
        return len(self._containers)

    @property
    def basis(self) -> np.ndarray:
        """Copy of the basis, one unit vector per row."""
        return self._basis.copy()

    # Internal -------------------------------------------------------------
    def _harvest(self, query: np.ndarray) -> Dict[int, np.ndarray]:
        candidates: Dict[int, np.ndarray] = {}
        search_size = self._search_size

        for container, weight in zip(self._containers, self._basis @ query):
            # First entry with weight >= the query's, since stored keys are >= 0
            position = bisect.bisect_left(container, WeightedVector(float(weight), -1, query))

            for entry in container[position:position + search_size]:
                candidates.setdefault(entry.key, entry.vector)
            for entry in reversed(container[max(0, position - search_size):position]):
                candidates.setdefault(entry.key, entry.vector)

        return candidates
