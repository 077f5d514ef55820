import pytest

from teachos.pbitmap import PersistentBitmap


class _MemoryFile:
    """A fixed-length file held in memory."""

    def __init__(self, length):
        self.data = bytearray(length)

    def read_at(self, num_bytes, position):
        if num_bytes <= 0 or position >= len(self.data):
            return b""
        return bytes(self.data[position : position + num_bytes])

    def write_at(self, data, position):
        if not data or position >= len(self.data):
            return 0
        chunk = bytes(data)[: len(self.data) - position]
        self.data[position : position + len(chunk)] = chunk
        return len(chunk)


def test_without_file_starts_clear():
    bm = PersistentBitmap(64)
    assert bm.num_clear() == 64


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        PersistentBitmap(0)


def test_write_back_stores_serialised_form():
    bm = PersistentBitmap(64)
    bm.mark(0)
    bm.mark(33)
    file = _MemoryFile(8)
    bm.write_back(file)
    assert bytes(file.data) == bm.to_bytes()


def test_round_trip_through_constructor():
    original = PersistentBitmap(128)
    for i in (0, 2, 31, 32, 127):
        original.mark(i)
    file = _MemoryFile(original.size_in_bytes)
    original.write_back(file)

    loaded = PersistentBitmap(128, file)
    assert [loaded.test(i) for i in range(128)] == [
        original.test(i) for i in range(128)
    ]
    assert loaded.num_clear() == original.num_clear()


def test_fetch_from_overwrites_state():
    source = PersistentBitmap(32)
    source.mark(4)
    file = _MemoryFile(4)
    source.write_back(file)

    target = PersistentBitmap(32)
    target.mark(10)
    target.fetch_from(file)
    assert target.test(4)
    assert not target.test(10)


def test_short_file_loads_only_prefix():
    file = _MemoryFile(1)
    file.data[0] = 0xFF
    bm = PersistentBitmap(64)
    bm.mark(50)
    bm.fetch_from(file)
    assert all(bm.test(i) for i in range(8))
    assert bm.test(50)
    assert not bm.test(8)


def test_is_a_working_bitmap():
    bm = PersistentBitmap(40)
    bm.self_test()
    assert bm.find_and_set() == 0
    assert bm.num_clear() == 39