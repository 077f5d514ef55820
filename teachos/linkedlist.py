"""Singly linked lists of arbitrary items, plain and sorted."""


def _require(condition, message):
    if not condition:
        raise AssertionError(message)


class _Node:
    __slots__ = ("item", "next")

    def __init__(self, item):
        self.item = item
        self.next = None


class LinkedList:
    """A singly linked list in which every item appears at most once.

    Items are compared with ``==``; adding an item that is already on the
    list raises ValueError.
    """

    def __init__(self):
        self._first = None
        self._last = None
        self._count = 0

    def _check_absent(self, item):
        if item in self:
            raise ValueError(f"{item!r} is already in the list")

    def prepend(self, item):
        """Put ``item`` at the front of the list."""
        self._check_absent(item)
        node = _Node(item)
        if self._first is None:
            self._last = node
        else:
            node.next = self._first
        self._first = node
        self._count += 1

    def append(self, item):
        """Put ``item`` at the end of the list."""
        self._check_absent(item)
        node = _Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._count += 1

    def front(self):
        """Return the first item without removing it."""
        if self._first is None:
            raise IndexError("front of an empty list")
        return self._first.item

    def remove_front(self):
        """Take the first item off the list and return it."""
        if self._first is None:
            raise IndexError("remove from an empty list")
        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        self._count -= 1
        return node.item

    def remove(self, item):
        """Remove ``item``, which must be on the list."""
        prev = None
        node = self._first
        while node is not None:
            if node.item == item:
                if prev is None:
                    self._first = node.next
                else:
                    prev.next = node.next
                if node is self._last:
                    self._last = prev
                self._count -= 1
                return
            prev, node = node, node.next
        raise ValueError(f"{item!r} is not in the list")

    def __contains__(self, item):
        return any(existing == item for existing in self)

    def __len__(self):
        return self._count

    def __iter__(self):
        node = self._first
        while node is not None:
            yield node.item
            node = node.next

    def is_empty(self):
        return self._count == 0

    def apply(self, func):
        """Call ``func`` on every item, front to back."""
        for item in self:
            func(item)

    def sanity_check(self):
        """Raise AssertionError if the list's links or count are inconsistent."""
        if self._first is None:
            _require(
                self._count == 0 and self._last is None,
                "empty list must have no last element and a count of 0",
            )
            return
        found = 0
        node = self._first
        while node is not None:
            found += 1
            _require(found <= self._count, "list is longer than its count")
            if node.next is None:
                _require(node is self._last, "last link does not end the list")
            node = node.next
        _require(found == self._count, "list count does not match its length")

    def self_test(self, items):
        """Exercise the list with ``items``; the list must start empty."""
        items = list(items)
        self.sanity_check()
        _require(self.is_empty() and self._first is None, "list must start empty")
        _require(not list(self), "iterating an empty list must yield nothing")

        for item in items:
            self.append(item)
            _require(item in self, f"{item!r} should be in the list")
            _require(not self.is_empty(), "list should not be empty")
        self.sanity_check()

        for item in items:
            self.remove(item)
            _require(item not in self, f"{item!r} should have been removed")
        _require(self.is_empty(), "list should be empty again")
        self.sanity_check()


class SortedList(LinkedList):
    """A linked list kept in increasing order.

    ``compare(x, y)`` returns a negative number if x sorts before y, zero if
    they are equal and a positive number otherwise.  Items that compare
    equal keep the order in which they were inserted.
    """

    def __init__(self, compare):
        super().__init__()
        self._compare = compare

    def insert(self, item):
        """Put ``item`` into the list at its sorted position."""
        self._check_absent(item)
        node = _Node(item)
        if self._first is None:
            self._first = self._last = node
        elif self._compare(item, self._first.item) < 0:
            node.next = self._first
            self._first = node
        else:
            ptr = self._first
            while ptr.next is not None:
                if self._compare(item, ptr.next.item) < 0:
                    node.next = ptr.next
                    ptr.next = node
                    self._count += 1
                    return
                ptr = ptr.next
            self._last.next = node
            self._last = node
        self._count += 1

    def prepend(self, item):
        """Insert ``item`` in sorted order; the front has no special meaning."""
        self.insert(item)

    def append(self, item):
        """Insert ``item`` in sorted order; the end has no special meaning."""
        self.insert(item)

    def sanity_check(self):
        """Check the links and count, and that the items are in order."""
        super().sanity_check()
        ordered = list(self)
        for prev, cur in zip(ordered, ordered[1:]):
            _require(
                self._compare(prev, cur) <= 0,
                f"{prev!r} and {cur!r} are out of order",
            )

    def self_test(self, items):
        """Exercise the sorted list with ``items``; it must start empty."""
        items = list(items)
        super().self_test(items)

        for item in items:
            self.insert(item)
            _require(item in self, f"{item!r} should be in the list")
        self.sanity_check()

        removed = []
        for _ in items:
            item = self.remove_front()
            _require(item not in self, f"{item!r} should have been removed")
            removed.append(item)
        _require(self.is_empty(), "list should be empty again")

        for prev, cur in zip(removed, removed[1:]):
            _require(
                self._compare(prev, cur) <= 0,
                "items did not come out in sorted order",
            )
        self.sanity_check()