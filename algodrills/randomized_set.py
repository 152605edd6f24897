"""A set with constant-time insert, remove and random pick."""

import random


class RandomizedSet:
    """Set of values supporting O(1) insert, remove and uniform random pick."""

    def __init__(self, rng=None):
        self._items = []
        self._index = {}
        self._rng = rng if rng is not None else random.Random()

    def insert(self, value):
        """Add ``value``; return False if it was already present."""
        if value in self._index:
            return False
        self._index[value] = len(self._items)
        self._items.append(value)
        return True

    def remove(self, value):
        """Remove ``value``; return False if it was not present."""
        if value not in self._index:
            return False
        position = self._index.pop(value)
        last = self._items.pop()
        if position < len(self._items):
            self._items[position] = last
            self._index[last] = position
        return True

    def get_random(self):
        """Return a uniformly chosen member."""
        if not self._items:
            raise IndexError("get_random from an empty set")
        return self._rng.choice(self._items)

    def __len__(self):
        return len(self._items)

    def __contains__(self, value):
        return value in self._index

    def __iter__(self):
        return iter(list(self._items))