"""Last-in, first-out stacks of integers: one bounded by an array, one unbounded."""

import sys
from abc import ABC, abstractmethod

from teachos.intlist import IntList

_FIRST_TEST_VALUE = 17


def _emit(lines, line):
    lines.append(line)
    print(line)


def _drain(stack, lines):
    while not stack.is_empty():
        _emit(lines, f"popping {stack.pop()}")


class Stack(ABC):
    """A stack of integers; concrete stacks say how values are stored."""

    @abstractmethod
    def push(self, value):
        """Put ``value`` on top of the stack."""

    @abstractmethod
    def pop(self):
        """Take the top value off the stack and return it."""

    @abstractmethod
    def is_full(self):
        """Return True if no more values fit on the stack."""

    @abstractmethod
    def is_empty(self):
        """Return True if the stack holds nothing."""

    def self_test(self, num_to_push):
        """Push ``num_to_push`` successive values, then pop them all.

        Each step is printed; the printed lines are also returned.
        """
        lines = []
        for count in range(_FIRST_TEST_VALUE, _FIRST_TEST_VALUE + num_to_push):
            if self.is_full():
                raise IndexError("stack filled up during the self test")
            _emit(lines, f"pushing {count}")
            self.push(count)
        _drain(self, lines)
        return lines


class ArrayStack(Stack):
    """A stack holding at most ``size`` integers."""

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


class ListStack(Stack):
    """A stack kept on a linked list; it never fills up."""

    def __init__(self):
        self._list = IntList()

    def __len__(self):
        return len(self._list)

    def push(self, value):
        """Put ``value`` on top of the stack."""
        self._list.prepend(value)

    def pop(self):
        """Take the top value off the stack; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from an empty stack")
        return self._list.remove()

    def is_full(self):
        return False

    def is_empty(self):
        return self._list.is_empty()


def fill_self_test(stack):
    """Push successive values until ``stack`` is full, then pop them all.

    The stack must be able to fill up.  Each step is printed; the printed
    lines are also returned.
    """
    lines = []
    count = _FIRST_TEST_VALUE
    while not stack.is_full():
        _emit(lines, f"pushing {count}")
        stack.push(count)
        count += 1
    _drain(stack, lines)
    return lines


def main(argv=None):
    """Run the self test on an array stack and on a list stack."""
    del argv
    print("Testing ArrayStack")
    ArrayStack(10).self_test(10)
    print("Testing ListStack")
    ListStack().self_test(10)
    sys.stdout.flush()
    return 0