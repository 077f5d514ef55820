"""Self tests for the bitmap, list, sorted list and hash table classes."""

from dataclasses import dataclass

from teachos.bitmap import Bitmap
from teachos.hashtable import HashTable
from teachos.linkedlist import LinkedList, SortedList

LIST_TEST_VECTOR = (9, 5, 7)
# Enough entries to force the hash table to grow.
HASH_TEST_VECTOR = tuple(str(i) for i in range(15))


def int_compare(x, y):
    """Return -1, 0 or 1 as ``x`` is less than, equal to or greater than ``y``."""
    if x < y:
        return -1
    if x == y:
        return 0
    return 1


def hash_int(key):
    """Hash an integer key as its unsigned 32-bit value."""
    return key & 0xFFFFFFFF


def hash_key(text):
    """Return the integer key of a decimal string item."""
    return int(text)


@dataclass
class SelfTestSubjects:
    """The structures exercised by :func:`lib_self_test`."""

    bitmap: Bitmap
    list: LinkedList
    sorted_list: SortedList
    hash_table: HashTable


def lib_self_test():
    """Run the self tests; return the exercised structures, left empty."""
    subjects = SelfTestSubjects(
        bitmap=Bitmap(200),
        list=LinkedList(),
        sorted_list=SortedList(int_compare),
        hash_table=HashTable(hash_key, hash_int),
    )
    subjects.bitmap.self_test()
    subjects.list.self_test(LIST_TEST_VECTOR)
    subjects.sorted_list.self_test(LIST_TEST_VECTOR)
    subjects.hash_table.self_test(HASH_TEST_VECTOR)
    return subjects