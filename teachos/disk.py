"""An in-memory sector disk and a thread-safe interface to it."""

import threading

SECTOR_SIZE = 128
NUM_SECTORS = 1024


class MemoryDisk:
    """A disk of fixed-size sectors held in memory, all zero at first."""

    def __init__(self, num_sectors=NUM_SECTORS, sector_size=SECTOR_SIZE):
        if num_sectors <= 0:
            raise ValueError(f"a disk needs at least one sector, got {num_sectors}")
        if sector_size <= 0:
            raise ValueError(f"sector size must be positive, got {sector_size}")
        self._num_sectors = num_sectors
        self._sector_size = sector_size
        self._data = bytearray(num_sectors * sector_size)

    @property
    def num_sectors(self):
        return self._num_sectors

    @property
    def sector_size(self):
        return self._sector_size

    def _span(self, sector):
        if not 0 <= sector < self._num_sectors:
            raise IndexError(
                f"sector {sector} out of range for a disk of {self._num_sectors} sectors"
            )
        start = sector * self._sector_size
        return start, start + self._sector_size

    def read_sector(self, sector):
        """Return the contents of ``sector``."""
        start, end = self._span(sector)
        return bytes(self._data[start:end])

    def write_sector(self, sector, data):
        """Replace the contents of ``sector``; short data is padded with zeros."""
        start, end = self._span(sector)
        data = bytes(data)
        if len(data) > self._sector_size:
            raise ValueError(
                f"{len(data)} bytes do not fit in a sector of {self._sector_size}"
            )
        self._data[start:end] = data.ljust(self._sector_size, b"\0")


class SynchDisk:
    """Serialises sector reads and writes so that only one runs at a time."""

    def __init__(self, disk):
        self._disk = disk
        self._lock = threading.Lock()

    @property
    def num_sectors(self):
        return self._disk.num_sectors

    @property
    def sector_size(self):
        return self._disk.sector_size

    def read_sector(self, sector):
        """Return the contents of ``sector`` once the read has finished."""
        with self._lock:
            return self._disk.read_sector(sector)

    def write_sector(self, sector, data):
        """Write ``data`` to ``sector``, returning once the write has finished."""
        with self._lock:
            self._disk.write_sector(sector, data)