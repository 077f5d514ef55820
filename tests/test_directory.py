import pytest

from teachos.directory import FILE_NAME_MAX_LEN, Directory, DirectoryEntry
from teachos.disk import MemoryDisk, SynchDisk
from teachos.filehdr import FileHeader
from teachos.openfile import OpenFile
from teachos.pbitmap import PersistentBitmap

SECTOR = 128


def make_env(dir_size):
    disk = SynchDisk(MemoryDisk(num_sectors=64, sector_size=SECTOR))
    free_map = PersistentBitmap(64)
    free_map.mark(1)
    header = FileHeader(SECTOR)
    assert header.allocate(free_map, dir_size * Directory.ENTRY_SIZE)
    header.write_back(disk, 1)
    return disk, free_map, OpenFile(disk, 1)


def test_new_directory_is_empty():
    directory = Directory(10)
    assert directory.names() == []
    assert directory.find("a") is None


def test_add_and_find():
    directory = Directory(10)
    assert directory.add("notes", 7)
    assert directory.find("notes") == 7
    assert directory.names() == ["notes"]


def test_duplicate_name_is_refused():
    directory = Directory(10)
    assert directory.add("a", 2)
    assert not directory.add("a", 3)
    assert directory.find("a") == 2


def test_full_directory_refuses_new_names():
    directory = Directory(2)
    assert directory.add("a", 2)
    assert directory.add("b", 3)
    assert not directory.add("c", 4)
    assert directory.names() == ["a", "b"]


def test_remove():
    directory = Directory(4)
    directory.add("a", 2)
    assert directory.remove("a")
    assert directory.find("a") is None
    assert not directory.remove("a")


def test_removed_slot_is_reused():
    directory = Directory(1)
    directory.add("a", 2)
    directory.remove("a")
    assert directory.add("b", 5)
    assert directory.find("b") == 5


def test_long_names_are_truncated():
    directory = Directory(4)
    long_name = "abcdefghijk"
    directory.add(long_name, 5)
    assert directory.names() == [long_name[:FILE_NAME_MAX_LEN]]
    assert directory.find(long_name[:FILE_NAME_MAX_LEN]) == 5
    assert not directory.add(long_name[:FILE_NAME_MAX_LEN] + "Z", 6)


def test_entry_round_trip():
    entry = DirectoryEntry(True, 12, "file")
    raw = entry.to_bytes()
    assert len(raw) == Directory.ENTRY_SIZE
    assert DirectoryEntry.from_bytes(raw) == entry


def test_write_back_and_fetch_from():
    _, _, file = make_env(10)
    directory = Directory(10)
    directory.add("one", 3)
    directory.add("two", 4)
    directory.remove("one")
    directory.add("three", 9)
    directory.write_back(file)

    loaded = Directory(10)
    loaded.fetch_from(file)
    assert loaded.names() == directory.names()
    assert loaded.find("three") == 9
    assert loaded.find("two") == 4
    assert loaded.find("one") is None


def test_fetch_from_blank_file_is_empty():
    _, _, file = make_env(10)
    directory = Directory(10)
    directory.fetch_from(file)
    assert directory.names() == []


def test_size_in_bytes():
    assert Directory(10).size_in_bytes == 10 * Directory.ENTRY_SIZE


def test_describe_lists_entries_and_headers():
    disk, free_map, _ = make_env(10)
    free_map.mark(3)
    header = FileHeader(SECTOR)
    assert header.allocate(free_map, 10)
    header.write_back(disk, 3)
    directory = Directory(10)
    directory.add("notes", 3)
    text = directory.describe(disk)
    assert text.startswith("Directory contents:\n")
    assert "Name: notes, Sector: 3\n" in text
    assert "File size: 10." in text


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        Directory(-1)