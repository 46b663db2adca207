"""Building blocks for a fast reduced-space algorithm: vectors, reporting, errors and interfaces."""

__version__ = "0.1.0"

__all__ = ["enums", "reporter", "exceptions", "vector", "problem", "strategy"]