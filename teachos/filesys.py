"""A flat file system on a sector disk: one directory and a free-sector bitmap.

The bitmap of free sectors and the directory are themselves files.  Their
headers live in well-known sectors so the file system can find them when it
is mounted.  Changes made by ``create`` and ``remove`` are written back at
once; a failed operation writes nothing.
"""

from teachos.bitmap import BITS_IN_BYTE
from teachos.directory import Directory
from teachos.filehdr import FileHeader
from teachos.openfile import OpenFile
from teachos.pbitmap import PersistentBitmap

FREE_MAP_SECTOR = 0
DIRECTORY_SECTOR = 1
NUM_DIR_ENTRIES = 10
DIRECTORY_FILE_SIZE = Directory.ENTRY_SIZE * NUM_DIR_ENTRIES


class FileSystem:
    """Files named in a single fixed-size directory on ``disk``.

    ``disk`` needs ``read_sector``, ``write_sector``, ``sector_size`` and
    ``num_sectors``.  With ``format`` true the disk is initialised with an
    empty directory and a fresh free-sector bitmap; otherwise the existing
    bitmap and directory files are opened.
    """

    def __init__(self, disk, format=False):
        self._disk = disk
        if format:
            self._format()
        self._free_map_file = OpenFile(disk, FREE_MAP_SECTOR)
        self._directory_file = OpenFile(disk, DIRECTORY_SECTOR)
        if format:
            self._free_map_pending.write_back(self._free_map_file)
            Directory(NUM_DIR_ENTRIES).write_back(self._directory_file)
            del self._free_map_pending

    @property
    def num_sectors(self):
        return self._disk.num_sectors

    @property
    def free_map_file_size(self):
        """Length in bytes of the free-sector bitmap file."""
        return self._disk.num_sectors // BITS_IN_BYTE

    def _format(self):
        free_map = PersistentBitmap(self._disk.num_sectors)
        free_map.mark(FREE_MAP_SECTOR)
        free_map.mark(DIRECTORY_SECTOR)

        map_header = FileHeader(self._disk.sector_size)
        dir_header = FileHeader(self._disk.sector_size)
        if not map_header.allocate(free_map, self.free_map_file_size):
            raise ValueError("disk is too small to hold the free-sector bitmap")
        if not dir_header.allocate(free_map, DIRECTORY_FILE_SIZE):
            raise ValueError("disk is too small to hold the directory")

        map_header.write_back(self._disk, FREE_MAP_SECTOR)
        dir_header.write_back(self._disk, DIRECTORY_SECTOR)
        self._free_map_pending = free_map

    def _load_directory(self):
        directory = Directory(NUM_DIR_ENTRIES)
        directory.fetch_from(self._directory_file)
        return directory

    def _load_free_map(self):
        return PersistentBitmap(self._disk.num_sectors, self._free_map_file)

    def create(self, name, initial_size):
        """Create a file of ``initial_size`` bytes.

        Return False if the name is taken, no sector is free for the
        header, the directory is full, or there is no room for the data.
        """
        directory = self._load_directory()
        if directory.find(name) is not None:
            return False
        free_map = self._load_free_map()
        sector = free_map.find_and_set()
        if sector is None:
            return False
        if not directory.add(name, sector):
            return False
        header = FileHeader(self._disk.sector_size)
        if not header.allocate(free_map, initial_size):
            return False
        header.write_back(self._disk, sector)
        directory.write_back(self._directory_file)
        free_map.write_back(self._free_map_file)
        return True

    def open(self, name):
        """Open ``name`` for reading and writing, or return None if it does not exist."""
        sector = self._load_directory().find(name)
        if sector is None:
            return None
        return OpenFile(self._disk, sector)

    def remove(self, name):
        """Delete ``name`` and free its sectors; return False if it does not exist."""
        directory = self._load_directory()
        sector = directory.find(name)
        if sector is None:
            return False
        header = FileHeader(self._disk.sector_size)
        header.fetch_from(self._disk, sector)

        free_map = self._load_free_map()
        header.deallocate(free_map)
        free_map.clear(sector)
        directory.remove(name)

        free_map.write_back(self._free_map_file)
        directory.write_back(self._directory_file)
        return True

    def list(self):
        """Return the names of all files, in directory order."""
        return self._load_directory().names()

    def free_sectors(self):
        """Return how many disk sectors are unallocated."""
        return self._load_free_map().num_clear()

    def describe(self):
        """Return the bitmap and directory headers, the bitmap, and every file as text."""
        sector_size = self._disk.sector_size
        bit_header = FileHeader(sector_size)
        bit_header.fetch_from(self._disk, FREE_MAP_SECTOR)
        dir_header = FileHeader(sector_size)
        dir_header.fetch_from(self._disk, DIRECTORY_SECTOR)
        return "".join(
            [
                "Bit map file header:\n",
                bit_header.describe(self._disk),
                "Directory file header:\n",
                dir_header.describe(self._disk),
                self._load_free_map().describe(),
                self._load_directory().describe(self._disk),
            ]
        )