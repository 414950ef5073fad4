"""Classic array and recursion algorithms: shifts, searches, set operations and recursive maths."""

__version__ = "0.1.0"
__all__ = ["array_ops", "missing", "search", "setops", "recursion"]