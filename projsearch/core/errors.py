"""
Error kinds raised by searchers.
All are precondition failures detected before any index state changes.
"""


class SearchError(ValueError):
    """Base exception for searcher precondition failures."""
    pass


class InvalidConfiguration(SearchError):
    """Raised when a searcher is constructed or configured with unusable settings."""
    pass


class DimensionMismatch(SearchError):
    """Raised when a vector's shape disagrees with the index dimension."""

    def __init__(self, expected: int, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Vector dimension {actual} does not match expected dimension {expected}")


class InvalidArgument(SearchError):
    """Raised when an operation receives an argument outside its domain."""
    pass
