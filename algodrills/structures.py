"""Small keyed containers: a hash map, an LRU cache, a rate limiter and a
square detector."""

from collections import Counter, OrderedDict

_DEFAULT_BUCKETS = 19991
_LOG_INTERVAL = 10
_MISSING = -1


class HashMap:
    """Hash map using separate chaining over a fixed number of buckets.

    ``get`` returns -1 for a key that has no mapping.
    """

    def __init__(self, buckets=_DEFAULT_BUCKETS):
        if buckets < 1:
            raise ValueError(f"bucket count must be positive, got {buckets}")
        self._buckets = [[] for _ in range(buckets)]
        self._size = 0

    def _bucket(self, key):
        return self._buckets[hash(key) % len(self._buckets)]

    def put(self, key, value):
        """Map ``key`` to ``value``, replacing any earlier value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._size += 1

    def get(self, key):
        """Return the value mapped to ``key``, or -1 when there is none."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return _MISSING

    def remove(self, key):
        """Drop the mapping for ``key`` if there is one."""
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                self._size -= 1
                return

    def __contains__(self, key):
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __len__(self):
        return self._size


class LRUCache:
    """Fixed-capacity cache that evicts the least recently used key.

    ``get`` returns -1 for a key that is not cached.
    """

    def __init__(self, capacity):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries = OrderedDict()

    def get(self, key):
        """Return the cached value and mark ``key`` as most recently used."""
        if key not in self._entries:
            return _MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key, value):
        """Cache ``value`` under ``key``, evicting the oldest key if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) == self._capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries


class Logger:
    """Rate limiter letting each message through at most once per 10 ticks."""

    def __init__(self):
        self._next_allowed = {}

    def should_print_message(self, timestamp, message):
        """Return True and record the time if ``message`` may be printed now."""
        if timestamp < self._next_allowed.get(message, timestamp):
            return False
        self._next_allowed[message] = timestamp + _LOG_INTERVAL
        return True


class DetectSquares:
    """Multiset of points that counts axis-aligned squares with a query point."""

    def __init__(self):
        self._points = Counter()

    def add(self, point):
        """Add the point ``(x, y)``; duplicates are counted separately."""
        x, y = point
        self._points[(x, y)] += 1

    def count(self, point):
        """Return how many positive-area axis-aligned squares have the query
        point as one corner and stored points as the other three."""
        qx, qy = point
        total = 0
        for (x, y), times in list(self._points.items()):
            if x == qx or abs(qx - x) != abs(qy - y):
                continue
            total += times * self._points.get((qx, y), 0) * self._points.get((x, qy), 0)
        return total