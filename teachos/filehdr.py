"""File headers: the on-disk record of where a file's data sectors lie."""

import struct

from teachos.bitmap import div_round_up
from teachos.disk import SECTOR_SIZE

_INT = struct.Struct("<i")
_INT_SIZE = _INT.size


class FileHeader:
    """Describes a file's length and the disk sectors that hold its data.

    The header fits in one sector: two integers (the byte and sector
    counts) followed by a fixed table of direct sector numbers.
    """

    def __init__(self, sector_size=SECTOR_SIZE):
        num_direct = (sector_size - 2 * _INT_SIZE) // _INT_SIZE
        if num_direct < 1:
            raise ValueError(f"sector size {sector_size} is too small for a header")
        self._sector_size = sector_size
        self._num_direct = num_direct
        self._num_bytes = 0
        self._data_sectors = []

    @property
    def sector_size(self):
        return self._sector_size

    @property
    def num_direct(self):
        """Number of direct sector pointers a header holds."""
        return self._num_direct

    @property
    def max_file_size(self):
        """Largest file, in bytes, a header can describe."""
        return self._num_direct * self._sector_size

    @property
    def num_sectors(self):
        """Number of data sectors in the file."""
        return len(self._data_sectors)

    @property
    def data_sectors(self):
        """Disk sector numbers of the file's data, in file order."""
        return tuple(self._data_sectors)

    def allocate(self, free_map, file_size):
        """Take data sectors for a new file of ``file_size`` bytes from ``free_map``.

        Return False, leaving the map untouched, if too few sectors are free.
        """
        if not 0 <= file_size <= self.max_file_size:
            raise ValueError(
                f"file size {file_size} outside 0..{self.max_file_size}"
            )
        self._num_bytes = file_size
        needed = div_round_up(file_size, self._sector_size)
        if free_map.num_clear() < needed:
            return False
        self._data_sectors = [free_map.find_and_set() for _ in range(needed)]
        return True

    def deallocate(self, free_map):
        """Give the file's data sectors back to ``free_map``."""
        for sector in self._data_sectors:
            if not free_map.test(sector):
                raise AssertionError(f"sector {sector} is not marked in use")
            free_map.clear(sector)

    def fetch_from(self, disk, sector):
        """Load the header stored in ``sector`` of ``disk``."""
        self.load_bytes(disk.read_sector(sector))

    def write_back(self, disk, sector):
        """Store the header in ``sector`` of ``disk``."""
        disk.write_sector(sector, self.to_bytes())

    def byte_to_sector(self, offset):
        """Return the disk sector holding byte ``offset`` of the file."""
        index = offset // self._sector_size
        if offset < 0 or index >= len(self._data_sectors):
            raise IndexError(f"offset {offset} lies outside the file's sectors")
        return self._data_sectors[index]

    def file_length(self):
        """Return the number of bytes in the file."""
        return self._num_bytes

    def describe(self, disk):
        """Return the header's fields and the file's contents as text.

        Printable characters appear as they are; others as a backslash and
        their hexadecimal value.
        """
        parts = [
            f"FileHeader contents.  File size: {self._num_bytes}.  File blocks:\n",
            "".join(f"{sector} " for sector in self._data_sectors),
            "\nFile contents:\n",
        ]
        remaining = self._num_bytes
        for sector in self._data_sectors:
            data = disk.read_sector(sector)[: max(remaining, 0)]
            remaining -= len(data)
            parts.append(
                "".join(
                    chr(byte) if 0x20 <= byte <= 0x7E else f"\\{byte:x}"
                    for byte in data
                )
            )
            parts.append("\n")
        return "".join(parts)

    def to_bytes(self):
        """Serialise the header into exactly one sector's worth of bytes."""
        table = self._data_sectors + [0] * (self._num_direct - len(self._data_sectors))
        raw = b"".join(
            _INT.pack(value) for value in (self._num_bytes, len(self._data_sectors), *table)
        )
        return raw.ljust(self._sector_size, b"\0")

    def load_bytes(self, data):
        """Set the header from its serialised form."""
        data = bytes(data)
        needed = (2 + self._num_direct) * _INT_SIZE
        if len(data) < needed:
            raise ValueError(f"header needs {needed} bytes, got {len(data)}")
        values = [v for (v,) in _INT.iter_unpack(data[:needed])]
        num_bytes, num_sectors, table = values[0], values[1], values[2:]
        if not 0 <= num_sectors <= self._num_direct:
            raise ValueError(f"corrupt header: {num_sectors} data sectors")
        self._num_bytes = num_bytes
        self._data_sectors = table[:num_sectors]