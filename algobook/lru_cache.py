"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict

MISSING = -1


class LRUCache:
    """Maps integer keys to values, evicting the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._data: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """The value for ``key``, marking it most recently used; -1 if absent."""
        if key not in self._data:
            return MISSING
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` for ``key``, evicting the oldest key if the cache is full."""
        if key in self._data:
            self._data.move_to_end(key)
            self._data[key] = value
            return
        if len(self._data) == self.capacity:
            self._data.popitem(last=False)
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)