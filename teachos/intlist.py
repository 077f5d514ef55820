"""A simple last-in, first-out list of integers."""

from collections import deque


class IntList:
    """Integers added at and removed from the front."""

    def __init__(self):
        self._items = deque()

    def prepend(self, value):
        """Put ``value`` at the front of the list."""
        self._items.appendleft(value)

    def remove(self):
        """Take the front value off the list and return it."""
        if not self._items:
            raise IndexError("remove from an empty list")
        return self._items.popleft()

    def is_empty(self):
        return not self._items

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)