"""
Structured logging for searcher operations.
Every message carries an operation name, a status and an optional details dict.
"""

import logging
from typing import Any, Dict, List, Optional


class StructuredLogger:
    """Structured logger for index construction, insertion and search."""

    def __init__(self, name: str = "projsearch", level: Optional[str] = None):
        self.logger = logging.getLogger(name)
        if level is None:
            from ..core.config import get_log_level
            level = get_log_level()
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None,
                      level: int = logging.INFO):
        """Log a structured operation."""
        if not self.logger.isEnabledFor(level):
            return
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    def log_index_created(self, searcher: str, dimension: int, details: Dict[str, Any] = None):
        """Log construction of a searcher."""
        log_details = {"searcher": searcher, "dimension": dimension}
        if details:
            log_details.update(details)

        self.log_operation("index.created", "success", log_details)

    def log_vector_operation(self, operation: str, key: int, details: Dict[str, Any] = None,
                             status: str = "success"):
        """Log a per-vector operation. Emitted at debug level, adds are frequent."""
        log_details = {"key": key}
        if details:
            log_details.update(details)

        self.log_operation(f"vector.{operation}", status, log_details, level=logging.DEBUG)

    def log_search(self, searcher: str, requested: int, candidates: int, returned: int,
                   duration_ms: float = None):
        """Log a completed search."""
        log_details = {
            "searcher": searcher,
            "requested": requested,
            "candidates": candidates,
            "returned": returned
        }
        if duration_ms is not None:
            log_details["duration_ms"] = round(duration_ms, 3)

        self.log_operation("search", "success", log_details, level=logging.DEBUG)

    def log_rejected(self, operation: str, error: Exception, details: Dict[str, Any] = None):
        """Log a precondition failure before it is raised to the caller."""
        log_details = {
            "error_type": type(error).__name__,
            "error": str(error)[:100]  # Limit error message length
        }
        if details:
            log_details.update(details)

        self.log_operation(operation, "rejected", log_details, level=logging.WARNING)

    def log_recall_report(self, searcher: str, mean_recall: float, queries: int,
                          per_query: List[float] = None):
        """Log the outcome of a recall evaluation."""
        log_details = {
            "searcher": searcher,
            "mean_recall": round(mean_recall, 4),
            "queries": queries
        }
        if per_query:
            log_details["worst_recall"] = round(min(per_query), 4)

        self.log_operation("evaluation.recall", "completed", log_details)


# Global logger instance
logger = StructuredLogger()
