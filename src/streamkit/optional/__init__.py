"""Optional values without None ambiguity."""

from streamkit.optional.optional import Optional, empty, of, of_nullable

__all__ = [
    "Optional",
    "empty",
    "of",
    "of_nullable",
]
