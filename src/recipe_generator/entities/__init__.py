"""Domain entities for internal representation.

These are frozen dataclasses used internally by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .cache_entry import CacheEntryEntity

__all__ = ["CacheEntryEntity"]
