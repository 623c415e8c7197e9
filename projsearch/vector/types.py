"""
Value types shared by the searchers.
"""

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..core.errors import DimensionMismatch


@dataclass(frozen=True, order=True)
class WeightedVector:
    """A vector paired with a scalar weight.

    Ordering is by weight, then by key. The key is the insertion sequence
    number of a stored vector, so distinct vectors with equal projections
    never compare equal. Query forms use key -1 and sort ahead of every
    stored entry of the same weight.
    """

    weight: float
    key: int
    vector: np.ndarray = field(compare=False, repr=False)


@dataclass
class QueryResult:
    """Represents a search result from a searcher."""

    key: int
    """Insertion sequence number of the matching vector"""

    vector: np.ndarray
    """The matching vector"""

    distance: float
    """Distance from the query under the searcher's distance measure"""


def as_vector(value: Any, dimension: int) -> np.ndarray:
    """Convert an array-like to a read-only float64 vector of the given dimension."""
    try:
        vector = np.array(value, dtype=np.float64)
    except (TypeError, ValueError):
        # Ragged nesting or non-numeric components have no usable shape
        raise DimensionMismatch(dimension, f"unusable {type(value).__name__}") from None
    if vector.ndim != 1 or vector.shape[0] != dimension:
        raise DimensionMismatch(dimension, vector.shape[0] if vector.ndim == 1 else vector.shape)
    vector.flags.writeable = False
    return vector
