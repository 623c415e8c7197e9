"""
FAISS-backed searcher satisfying the same contract as the projection searcher.
"""

import time
from typing import Any, List

import numpy as np

from ..core.errors import InvalidConfiguration
from ..util.logging import logger
from .distance import EuclideanDistance, IDistanceMeasure, SquaredEuclideanDistance
from .index import ISearcher
from .types import QueryResult

RERANK_MARGIN = 16


class FaissSearch(ISearcher):
    """Euclidean search on a flat FAISS index.

    FAISS ranks by squared L2 distance, so only the euclidean measures are
    accepted. FAISS selects in float32, so RERANK_MARGIN extra labels are
    fetched and the final top n is chosen by a float64 re-rank with the
    configured measure. Near-ties closer than float32 rounding can still be
    missed when more than RERANK_MARGIN vectors crowd the cutoff.
    """

    def __init__(self, dimension: int, distance_measure: IDistanceMeasure, search_size: int = 10):
        """
        Initialize FAISS searcher.

        Args:
            dimension: Dimension of the vectors
            distance_measure: EuclideanDistance or SquaredEuclideanDistance
            search_size: Reported through the contract, unused by exact search
        """
        if not isinstance(distance_measure, (EuclideanDistance, SquaredEuclideanDistance)):
            self._reject("index.create", InvalidConfiguration(
                f"FAISS searcher supports only euclidean measures, got {distance_measure.name}"))
        try:
            import faiss
        except ImportError:
            raise ImportError("FAISS not installed. Please install faiss-cpu package.")

        super().__init__(dimension, distance_measure, search_size)
        self.faiss = faiss
        self.index = faiss.IndexFlatL2(self.dimension)

        # FAISS keeps float32 copies; originals are kept for exact distances
        self._vectors: List[np.ndarray] = []
        logger.log_index_created("faiss", self.dimension, {"distance": distance_measure.name})

    def add(self, vector: Any) -> None:
        """Add a single vector to the FAISS index."""
        vector = self._data_vector(vector)
        with self._lock:
            key = len(self._vectors)
            self.index.add(vector.astype(np.float32).reshape(1, -1))
            self._vectors.append(vector)
        logger.log_vector_operation("add", key, {"searcher": "faiss"})

    def search(self, query: Any, n: int) -> List[QueryResult]:
        """Search for the n nearest vectors."""
        query, n = self._validate_query(query, n)
        start = time.perf_counter()
        with self._lock:
            total = self.index.ntotal
            if not total:
                return []
            _, labels = self.index.search(query.astype(np.float32).reshape(1, -1),
                                         min(n + RERANK_MARGIN, total))
            candidates = {int(label): self._vectors[int(label)] for label in labels[0] if label >= 0}

        # Re-rank in float64 so ties and distances match the other searchers
        results = self._rank(query, candidates, n)
        logger.log_search("faiss", n, len(candidates), len(results),
                          (time.perf_counter() - start) * 1000)
        return results

    def size(self) -> int:
        return int(self.index.ntotal)
