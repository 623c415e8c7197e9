#!/usr/bin/env python3
"""
Recall evaluation utility.
Indexes random data in a projection searcher and an exact searcher, then reports
how many of the exact nearest neighbours the projection searcher finds.
"""

import argparse
import json
import sys
from pathlib import Path

import numpy as np

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from projsearch.core.errors import SearchError
from projsearch.core.evaluation import RecallReport, evaluate_recall
from projsearch.vector import BruteSearch, ProjectionSearch, get_distance_measure


def format_report(report: RecallReport) -> str:
    """Format a recall report for display."""
    lines = []

    lines.append(f"Searcher: {report.searcher}")
    lines.append(f"Queries: {report.queries} (top {report.top_n})")
    lines.append(f"Mean recall: {report.mean_recall:.3f}")
    if report.per_query:
        lines.append(f"Worst recall: {min(report.per_query):.3f}")

    lines.append(f"Search time: {report.search_ms:.1f} ms")
    lines.append(f"Exact time: {report.reference_ms:.1f} ms")
    if report.search_ms > 0:
        lines.append(f"Speedup: {report.reference_ms / report.search_ms:.2f}x")

    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Measure projection searcher recall against exact search")
    parser.add_argument("--dimension", type=int, default=20, help="Vector dimension")
    parser.add_argument("--count", type=int, default=2000, help="Number of indexed vectors")
    parser.add_argument("--queries", type=int, default=100, help="Number of queries")
    parser.add_argument("--projections", type=int, default=8, help="Number of random projections")
    parser.add_argument("--search-size", type=int, default=10, help="Window per side per projection")
    parser.add_argument("--top-n", type=int, default=10, help="Neighbours requested per query")
    parser.add_argument("--distance", default="euclidean", help="Distance measure name")
    parser.add_argument("--seed", type=int, default=None, help="Seed for data and basis")
    parser.add_argument("--json", action="store_true", help="Output in JSON format")

    args = parser.parse_args()

    try:
        distance = get_distance_measure(args.distance)
        projection = ProjectionSearch(args.dimension, distance, args.projections, args.search_size,
                                      seed=args.seed)
        brute = BruteSearch(args.dimension, distance)

        rng = np.random.default_rng(args.seed)
        data = rng.standard_normal((args.count, args.dimension))
        projection.batch_add(data)
        brute.batch_add(data)

        queries = rng.standard_normal((args.queries, args.dimension))
        report = evaluate_recall(projection, brute, queries, args.top_n)
    except SearchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report))


if __name__ == "__main__":
    main()
