"""A bounded last-in, first-out stack of arbitrary values."""

import sys


def _successor(value):
    if isinstance(value, str) and len(value) == 1:
        return chr(ord(value) + 1)
    return value + 1


class BoundedStack:
    """A stack holding at most ``size`` values."""

    def __init__(self, size):
        if size < 1:
            raise ValueError(f"stack size must be at least 1, got {size}")
        self._size = size
        self._items = []

    @property
    def size(self):
        """Maximum number of values the stack holds."""
        return self._size

    def __len__(self):
        return len(self._items)

    def push(self, value):
        """Put ``value`` on top of the stack; raise IndexError when full."""
        if self.is_full():
            raise IndexError("push onto a full stack")
        self._items.append(value)

    def pop(self):
        """Take the top value off the stack; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def is_full(self):
        return len(self._items) == self._size

    def is_empty(self):
        return not self._items

    def self_test(self, start):
        """Fill the stack with successive values from ``start``, then empty it.

        Each step is printed; the printed lines are also returned.
        """
        lines = []
        count = start
        while not self.is_full():
            lines.append(f"pushing {count}")
            print(lines[-1])
            self.push(count)
            count = _successor(count)
        while not self.is_empty():
            lines.append(f"popping {self.pop()}")
            print(lines[-1])
        return lines


def main(argv=None):
    """Run the stack self test on integers and on characters."""
    del argv
    print("Testing int stack")
    BoundedStack(10).self_test(17)
    print("Testing char stack")
    BoundedStack(10).self_test("a")
    sys.stdout.flush()
    return 0