"""
Exact brute-force searcher.
"""

import numpy as np
import pytest

from projsearch.core.errors import DimensionMismatch, InvalidArgument, InvalidConfiguration
from projsearch.vector import BruteSearch, ISearcher, ManhattanDistance, get_distance_measure


def test_brute_search_implements_contract():
    """Test that BruteSearch implements the ISearcher interface."""
    searcher = BruteSearch(3, get_distance_measure("euclidean"))

    assert isinstance(searcher, ISearcher)
    assert searcher.size() == 0
    assert searcher.get_search_size() == 10


def test_brute_search_ranks_everything():
    searcher = BruteSearch(2, ManhattanDistance())
    searcher.batch_add([[5, 5], [1, 0], [0, 0], [0, 2]])

    results = searcher.search([0.0, 0.0], 3)

    assert [r.key for r in results] == [2, 1, 3]
    assert [r.distance for r in results] == [0.0, 1.0, 2.0]


def test_search_size_does_not_change_results():
    searcher = BruteSearch(2, get_distance_measure("euclidean"), search_size=1)
    searcher.batch_add([[i, i] for i in range(20)])
    before = [r.key for r in searcher.search([3.2, 3.2], 5)]

    searcher.set_search_size(0)

    assert searcher.get_search_size() == 0
    assert [r.key for r in searcher.search([3.2, 3.2], 5)] == before


def test_n_larger_than_size_returns_all():
    searcher = BruteSearch(1, get_distance_measure("euclidean"))
    searcher.batch_add([[3.0], [1.0], [2.0]])

    results = searcher.search([0.0], 10)

    assert [r.key for r in results] == [1, 2, 0]


def test_brute_search_errors():
    searcher = BruteSearch(2, get_distance_measure("euclidean"))

    with pytest.raises(DimensionMismatch):
        searcher.add([1.0, 2.0, 3.0])
    with pytest.raises(InvalidArgument):
        searcher.search([0.0, 0.0], 0)
    with pytest.raises(DimensionMismatch):
        searcher.search(np.zeros(3), 1)
    with pytest.raises(InvalidConfiguration):
        BruteSearch(2, get_distance_measure("euclidean"), search_size=-2)

    assert searcher.size() == 0
