"""
Memo cache for computed records, keyed by integer value.

Purely an optimization. Every value in here is a deterministic function of
its key and the (immutable) constant table, so two threads that miss at the
same time just compute the same record twice. The lock is held only around
a single insertion; lookups never wait on another computation.
"""

import threading
from typing import Callable, Optional

_MISSING = object()


class RecordCache:

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = max_size
        self._data = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key, default=None):
        # One lookup: a concurrent put may evict key at any moment.
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            self.misses += 1
            return default
        self.hits += 1
        return value

    def put(self, key, value):
        with self._lock:
            if self.max_size is not None and len(self._data) >= self.max_size:
                # Oldest insertion goes first; dicts keep insertion order.
                self._data.pop(next(iter(self._data)), None)
            self._data[key] = value
        return value

    def get_or_compute(self, key, compute: Callable):
        value = self._data.get(key, _MISSING)
        if value is not _MISSING:
            self.hits += 1
            return value
        self.misses += 1
        return self.put(key, compute(key))

    def clear(self):
        with self._lock:
            self._data.clear()
        self.hits = 0
        self.misses = 0

    def __contains__(self, key):
        return key in self._data

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"RecordCache(size={len(self)}, hits={self.hits}, misses={self.misses})"
