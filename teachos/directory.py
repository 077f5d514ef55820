"""A flat directory: a fixed table of file names and their header sectors."""

import struct
from dataclasses import dataclass

from teachos.filehdr import FileHeader

FILE_NAME_MAX_LEN = 9

_ENTRY = struct.Struct(f"<?3xi{FILE_NAME_MAX_LEN + 1}s2x")


def _stored_name(name):
    """Return ``name`` as it is kept in an entry: at most FILE_NAME_MAX_LEN bytes."""
    return name.encode("utf-8")[:FILE_NAME_MAX_LEN].decode("utf-8", "ignore")


@dataclass
class DirectoryEntry:
    """One slot of a directory: a file name and the sector of its header."""

    in_use: bool = False
    sector: int = 0
    name: str = ""

    def to_bytes(self):
        return _ENTRY.pack(self.in_use, self.sector, self.name.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data):
        in_use, sector, raw_name = _ENTRY.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", "replace")
        return cls(in_use, sector, name)


class Directory:
    """A table of ``size`` entries that cannot grow.

    Names are compared on their first FILE_NAME_MAX_LEN bytes only.
    """

    ENTRY_SIZE = _ENTRY.size

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"directory size must not be negative, got {size}")
        self._table = [DirectoryEntry() for _ in range(size)]

    @property
    def size(self):
        """Number of entries in the table."""
        return len(self._table)

    @property
    def size_in_bytes(self):
        """Length of the serialised table."""
        return len(self._table) * self.ENTRY_SIZE

    def _to_bytes(self):
        return b"".join(entry.to_bytes() for entry in self._table)

    def fetch_from(self, file):
        """Load the table from the start of ``file``.

        Entries the file is too short to hold keep their current contents.
        """
        storage = bytearray(self._to_bytes())
        chunk = bytes(file.read_at(len(storage), 0))[: len(storage)]
        storage[: len(chunk)] = chunk
        self._table = [
            DirectoryEntry.from_bytes(storage[i:i + self.ENTRY_SIZE])
            for i in range(0, len(storage), self.ENTRY_SIZE)
        ]

    def write_back(self, file):
        """Store the table at the start of ``file``."""
        file.write_at(self._to_bytes(), 0)

    def _find_entry(self, name):
        key = _stored_name(name)
        return next(
            (entry for entry in self._table if entry.in_use and entry.name == key),
            None,
        )

    def find(self, name):
        """Return the header sector of ``name``, or None if it is not listed."""
        entry = self._find_entry(name)
        return None if entry is None else entry.sector

    def add(self, name, new_sector):
        """Add ``name`` with its header in ``new_sector``.

        Return False if the name is already listed or the table is full.
        """
        if self._find_entry(name) is not None:
            return False
        slot = next((entry for entry in self._table if not entry.in_use), None)
        if slot is None:
            return False
        slot.in_use = True
        slot.name = _stored_name(name)
        slot.sector = new_sector
        return True

    def remove(self, name):
        """Remove ``name``; return False if it was not listed."""
        entry = self._find_entry(name)
        if entry is None:
            return False
        entry.in_use = False
        return True

    def names(self):
        """Return the names of all listed files, in table order."""
        return [entry.name for entry in self._table if entry.in_use]

    def describe(self, disk):
        """Return every listed file's name, header sector, header and contents."""
        parts = ["Directory contents:\n"]
        for entry in self._table:
            if entry.in_use:
                parts.append(f"Name: {entry.name}, Sector: {entry.sector}\n")
                header = FileHeader(disk.sector_size)
                header.fetch_from(disk, entry.sector)
                parts.append(header.describe(disk))
        parts.append("\n")
        return "".join(parts)