"""In-process storage for Wearorithm records."""

from memory.store import DuplicateUserError, InMemoryStore, Store

__all__ = ["DuplicateUserError", "InMemoryStore", "Store"]
