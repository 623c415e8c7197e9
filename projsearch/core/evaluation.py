"""
Recall evaluation - measures how many exact nearest neighbours an approximate searcher finds.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .errors import InvalidArgument
from ..util.logging import logger


@dataclass
class RecallReport:
    """Outcome of comparing a searcher against an exact reference."""
    searcher: str
    top_n: int
    per_query: List[float] = field(default_factory=list)
    search_ms: float = 0.0
    reference_ms: float = 0.0

    @property
    def queries(self) -> int:
        return len(self.per_query)

    @property
    def mean_recall(self) -> float:
        if not self.per_query:
            return 0.0
        return sum(self.per_query) / len(self.per_query)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "searcher": self.searcher,
            "top_n": self.top_n,
            "queries": self.queries,
            "mean_recall": self.mean_recall,
            "worst_recall": min(self.per_query) if self.per_query else 0.0,
            "search_ms": self.search_ms,
            "reference_ms": self.reference_ms
        }


def evaluate_recall(searcher, reference, queries: Iterable[Any], n: int) -> RecallReport:
    """
    Compare searcher results against an exact reference searcher.

    Both searchers must hold the same vectors added in the same order, so that
    insertion keys identify the same vectors. Recall for one query is the share
    of the reference's top n that the searcher also returned.

    Args:
        searcher: Searcher under evaluation
        reference: Exact searcher holding the same data
        queries: Query vectors
        n: Number of neighbours requested per query

    Returns:
        RecallReport with per-query recall and total search times
    """
    if n <= 0:
        raise InvalidArgument(f"Number of results must be > 0: {n}")
    if searcher.size() != reference.size():
        raise InvalidArgument(
            f"Searchers hold different data: {searcher.size()} vs {reference.size()} vectors")

    report = RecallReport(searcher=type(searcher).__name__, top_n=n)

    for query in queries:
        start = time.perf_counter()
        found = {result.key for result in searcher.search(query, n)}
        report.search_ms += (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        expected = {result.key for result in reference.search(query, n)}
        report.reference_ms += (time.perf_counter() - start) * 1000

        if not expected:
            report.per_query.append(1.0)
        else:
            report.per_query.append(len(found & expected) / len(expected))

    logger.log_recall_report(report.searcher, report.mean_recall, report.queries, report.per_query)
    return report
