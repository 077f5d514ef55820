# teachos

`teachos` is a small toolkit for teaching how an operating system is put together. It contains:

- the basic data structures a kernel leans on:
  - `teachos.bitmap.Bitmap`
  - `teachos.linkedlist.LinkedList` and `teachos.linkedlist.SortedList`
  - `teachos.hashtable.HashTable`
  - `teachos.intlist.IntList`, a plain front-in, front-out list of integers
- `teachos.debug.Debug`, which switches debug messages on and off by single-character flags;
- a flat, single-directory file system that stores its data on a simulated disk. It is made of:
  - `teachos.disk.MemoryDisk` and `teachos.disk.SynchDisk`
  - `teachos.pbitmap.PersistentBitmap`
  - `teachos.filehdr.FileHeader`
  - `teachos.openfile.OpenFile`
  - `teachos.directory.Directory` and `teachos.directory.DirectoryEntry`
  - `teachos.filesys.FileSystem`
- a few small stack classes that show the same idea written different ways:
  - `teachos.stacks.ArrayStack` and `teachos.stacks.ListStack`, both built on the abstract `teachos.stacks.Stack`
  - `teachos.templatestack.BoundedStack`

The package uses nothing outside the Python standard library. It needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Data structures

### Bitmap

A `Bitmap` is a fixed number of bits. All of them start clear.

```python
from teachos.bitmap import Bitmap

free = Bitmap(200)
free.mark(3)
assert free.test(3)
assert free.num_clear() == 199
first = free.find_and_set()   # lowest clear bit, now marked; None if all are set
print(free.describe())        # the numbers of the bits that are set
```

A bit number outside the bitmap raises `IndexError`. `to_bytes()` and `load_bytes()` give and take the bitmap's storage as little-endian 32-bit words.

### Lists and sorted lists

`LinkedList` keeps items in the order they were prepended or appended. Each item may be on a list only once; adding it a second time raises `ValueError`. `SortedList` takes a three-way comparison function and keeps its items in increasing order, so `remove_front` always returns the smallest item.

```python
from teachos.linkedlist import SortedList

def compare(x, y):
    return (x > y) - (x < y)

items = SortedList(compare)
for value in (9, 5, 7):
    items.insert(value)
assert list(items) == [5, 7, 9]
```

### Hash table

A `HashTable` is built from two functions:

- one that takes the key out of an item;
- one that hashes a key to a non-negative integer.

The table grows by itself as items are inserted.

```python
from teachos.hashtable import HashTable

table = HashTable(int, lambda key: key)
table.insert("12")
assert 12 in table
assert table.find(12) == "12"
assert table.remove(12) == "12"
```

`find` returns `None` for a missing key; `remove` raises `KeyError`.

Each structure has a `self_test` method that exercises it and raises `AssertionError` if something is wrong. `teachos.libtest.lib_self_test()` runs the self tests of a bitmap, a list, a sorted list and a hash table together and returns the structures it used.

### Debug flags

```python
from teachos.debug import Debug

debug = Debug("f")
assert debug.is_enabled("f")
debug.log("f", "file system message")   # printed to standard error
```

The flag `+` enables every message; `Debug(None)` enables none.

## The file system

The file system sits on a disk made of fixed-size sectors:

- Sector 0 holds the file header of the free-sector bitmap.
- Sector 1 holds the file header of the directory.
- Each file has a header of its own. The header lists the sectors that hold the file's data.

Files have a fixed size, set when the file is created. Names are compared and stored on their first 9 bytes. The directory has room for 10 files.

```python
from teachos.disk import MemoryDisk, SynchDisk
from teachos.filesys import FileSystem

disk = SynchDisk(MemoryDisk(1024, 128))
fs = FileSystem(disk, True)           # True formats the disk first

fs.create("notes", 300)
handle = fs.open("notes")
handle.write(b"hello, disk")
handle.seek(0)
print(handle.read(11))

print(fs.list())
print(fs.free_sectors())
print(fs.describe())                  # headers, bitmap, directory and file contents
fs.remove("notes")
```

`create` and `remove` return `False` when they cannot do their work; `open` returns `None` for a name that is not there.

`OpenFile` reads and writes through a seek position; it also has:

- `read_at` and `write_at`, which take an explicit position;
- `length()`, which gives the file's size.

A read or write never goes past the end of the file. The number of bytes moved is cut down to fit.

### What the file system does not do

- `MemoryDisk` keeps its sectors in memory only. Nothing is saved to a file on the host, so a disk is lost when the program ends.
- Files cannot grow after they are created, and there are no subdirectories.
- There is no command for working with the file system; it is used from Python.

## Stack examples

There are two commands. Each pushes a run of values onto a stack and prints them as they are popped off again.

```
teachos-stack
teachos-templatestack
```

- `teachos-stack` runs an `ArrayStack` of size 10 and a `ListStack`, pushing 10 values counting up from 17 onto each.
- `teachos-templatestack` runs a `BoundedStack` of size 10 twice: once with integers counting up from 17, and once with characters starting at `a`.

The `self_test` methods and `teachos.stacks.fill_self_test` also return the lines they print.