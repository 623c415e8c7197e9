"""
Distance measures used to rank candidates.
"""

from abc import ABC, abstractmethod
from typing import Dict, Type

import numpy as np

from ..core.errors import InvalidConfiguration


class IDistanceMeasure(ABC):
    """Abstract interface for distance measures."""

    name: str = ""

    @abstractmethod
    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        """Return a non-negative distance between two vectors of equal dimension."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EuclideanDistance(IDistanceMeasure):
    name = "euclidean"

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        return float(np.linalg.norm(np.subtract(a, b)))


class SquaredEuclideanDistance(IDistanceMeasure):
    """Euclidean distance without the square root. Same ranking, not a metric."""

    name = "squared_euclidean"

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        diff = np.subtract(a, b)
        return float(np.dot(diff, diff))


class ManhattanDistance(IDistanceMeasure):
    name = "manhattan"

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        return float(np.abs(np.subtract(a, b)).sum())


class CosineDistance(IDistanceMeasure):
    """1 - cosine similarity.

    A zero vector has no direction: it is at distance 0 from another zero
    vector and at distance 1 from everything else.
    """

    name = "cosine"

    def distance(self, a: np.ndarray, b: np.ndarray) -> float:
        norm_a = np.linalg.norm(a)
        norm_b = np.linalg.norm(b)
        if norm_a == 0 or norm_b == 0:
            return 0.0 if norm_a == norm_b else 1.0

        similarity = float(np.dot(a, b) / (norm_a * norm_b))
        # Rounding can push similarity slightly outside [-1, 1]
        return max(0.0, 1.0 - min(1.0, similarity))


DISTANCE_MEASURES: Dict[str, Type[IDistanceMeasure]] = {
    measure.name: measure
    for measure in (EuclideanDistance, SquaredEuclideanDistance, ManhattanDistance, CosineDistance)
}


def get_distance_measure(name: str) -> IDistanceMeasure:
    """Look up a distance measure by name."""
    try:
        return DISTANCE_MEASURES[name.lower()]()
    except KeyError:
        raise InvalidConfiguration(
            f"Unknown distance measure: {name} (expected one of {sorted(DISTANCE_MEASURES)})"
        ) from None
