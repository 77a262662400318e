"""Domain types for metal spot quotes.

Plain frozen dataclasses describing what the upstream summary reports, kept
separate from the HTTP client so formatting and tests can use them directly.
"""

__all__ = [
    "spot",
]
