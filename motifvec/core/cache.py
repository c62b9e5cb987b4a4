"""
Embedding Cache — name -> vector store owned by a vectorizer.

Grows only through explicit inserts. No eviction. Stored vectors are
read-only copies, so a cached embedding is returned bit-identically.

Concurrent reads are safe. Concurrent inserts on the same cache need
external locking.
"""

import logging
from typing import Dict, Iterator, Optional

import numpy as np

logger = logging.getLogger(__name__)


class EmbeddingCache:
    """Mutable mapping of motif name -> embedding."""

    def __init__(self):
        self._store: Dict[str, np.ndarray] = {}

    def insert(self, name: str, embedding: np.ndarray) -> None:
        """Store (or overwrite) the embedding for `name`."""
        vec = np.array(embedding, dtype=np.float64, copy=True)
        vec.setflags(write=False)
        replaced = name in self._store
        self._store[name] = vec
        logger.debug("cache %s %r (size=%d)", "replace" if replaced else "insert", name, len(self._store))

    def lookup(self, name: str) -> Optional[np.ndarray]:
        """Cached embedding for `name`, or None."""
        return self._store.get(name)

    def __getitem__(self, name: str) -> np.ndarray:
        return self._store[name]

    def __contains__(self, name) -> bool:
        return name in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def names(self):
        return list(self._store)
