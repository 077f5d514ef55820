"""A self-expanding chained hash table of arbitrary items."""

from teachos.linkedlist import LinkedList

INITIAL_BUCKETS = 4
RESIZE_RATIO = 3
INCREASE_SIZE_BY = 4


def _require(condition, message):
    if not condition:
        raise AssertionError(message)


class HashTable:
    """Items looked up by a key drawn from each item.

    ``get_key(item)`` returns an item's key and ``hash_func(key)`` returns a
    non-negative integer for a key.  Each key may be in the table at most
    once.  The table grows when it holds too many items per bucket.
    """

    def __init__(self, get_key, hash_func):
        self._get_key = get_key
        self._hash = hash_func
        self._count = 0
        self._buckets = self._new_buckets(INITIAL_BUCKETS)

    @staticmethod
    def _new_buckets(size):
        return [LinkedList() for _ in range(size)]

    @property
    def num_buckets(self):
        """Number of buckets currently in use."""
        return len(self._buckets)

    def _bucket_index(self, key):
        return self._hash(key) % len(self._buckets)

    def _bucket(self, key):
        return self._buckets[self._bucket_index(key)]

    def _find_in_bucket(self, bucket, key):
        for item in bucket:
            if self._get_key(item) == key:
                return True, item
        return False, None

    def _rehash(self):
        self.sanity_check()
        old = self._buckets
        self._buckets = self._new_buckets(len(old) * INCREASE_SIZE_BY)
        for bucket in old:
            while not bucket.is_empty():
                item = bucket.remove_front()
                self._bucket(self._get_key(item)).append(item)
        self.sanity_check()

    def insert(self, item):
        """Put ``item`` into the table; its key must not be there already."""
        key = self._get_key(item)
        if key in self:
            raise ValueError(f"key {key!r} is already in the table")
        if self._count // len(self._buckets) >= RESIZE_RATIO:
            self._rehash()
        self._bucket(key).append(item)
        self._count += 1

    def remove(self, key):
        """Remove and return the item with ``key``; raise KeyError if absent."""
        bucket = self._bucket(key)
        found, item = self._find_in_bucket(bucket, key)
        if not found:
            raise KeyError(key)
        bucket.remove(item)
        self._count -= 1
        return item

    def find(self, key):
        """Return the item with ``key``, or None if it is not in the table."""
        return self._find_in_bucket(self._bucket(key), key)[1]

    def __contains__(self, key):
        return self._find_in_bucket(self._bucket(key), key)[0]

    def __len__(self):
        return self._count

    def __iter__(self):
        for bucket in self._buckets:
            yield from bucket

    def is_empty(self):
        return self._count == 0

    def apply(self, func):
        """Call ``func`` on every item in the table."""
        for item in self:
            func(item)

    def sanity_check(self):
        """Raise AssertionError if the table's structure is inconsistent."""
        found = 0
        for index, bucket in enumerate(self._buckets):
            bucket.sanity_check()
            found += len(bucket)
            for item in bucket:
                _require(
                    self._bucket_index(self._get_key(item)) == index,
                    f"{item!r} is stored in the wrong bucket",
                )
        _require(found == self._count, "item count does not match the buckets")

    def self_test(self, items):
        """Exercise the table with ``items``; the table must start empty."""
        items = list(items)
        self.sanity_check()
        _require(self.is_empty(), "table must start empty")
        _require(not list(self), "iterating an empty table must yield nothing")

        for item in items:
            self.insert(item)
            _require(self._get_key(item) in self, f"{item!r} should be in the table")
            _require(not self.is_empty(), "table should not be empty")

        for item in items:
            _require(
                self.remove(self._get_key(item)) == item,
                f"removing {item!r} returned another item",
            )
        _require(self.is_empty(), "table should be empty again")
        self.sanity_check()