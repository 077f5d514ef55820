"""Open files: byte-level reads and writes on top of a sector disk."""

from teachos.filehdr import FileHeader


class OpenFile:
    """A file whose header sits in ``sector`` of ``disk``, opened for reading and writing.

    ``disk`` needs ``read_sector``, ``write_sector`` and ``sector_size``.
    The header stays in memory while the file is open.  Reads and writes
    never go past the file's fixed length.
    """

    def __init__(self, disk, sector):
        self._disk = disk
        self._header = FileHeader(disk.sector_size)
        self._header.fetch_from(disk, sector)
        self._position = 0

    @property
    def header(self):
        """The file's header."""
        return self._header

    @property
    def position(self):
        """Where the next ``read`` or ``write`` starts."""
        return self._position

    def seek(self, position):
        """Set where the next ``read`` or ``write`` starts."""
        self._position = position

    def read(self, num_bytes):
        """Read up to ``num_bytes`` from the current position and advance past them."""
        data = self.read_at(num_bytes, self._position)
        self._position += len(data)
        return data

    def write(self, data):
        """Write ``data`` at the current position; return and advance by the count written."""
        written = self.write_at(data, self._position)
        self._position += written
        return written

    def _clip(self, num_bytes, position):
        if position < 0:
            raise ValueError(f"file position must not be negative, got {position}")
        length = self._header.file_length()
        if num_bytes <= 0 or position >= length:
            return 0
        return min(num_bytes, length - position)

    def _sectors(self, position, count):
        size = self._disk.sector_size
        first = position // size
        last = (position + count - 1) // size
        return [self._header.byte_to_sector(i * size) for i in range(first, last + 1)], first * size

    def read_at(self, num_bytes, position):
        """Return up to ``num_bytes`` starting at ``position``; the position is unchanged."""
        count = self._clip(num_bytes, position)
        if not count:
            return b""
        sectors, base = self._sectors(position, count)
        buffer = b"".join(self._disk.read_sector(sector) for sector in sectors)
        start = position - base
        return buffer[start:start + count]

    def write_at(self, data, position):
        """Write ``data`` starting at ``position``; return the number of bytes written."""
        data = bytes(data)
        count = self._clip(len(data), position)
        if not count:
            return 0
        sectors, base = self._sectors(position, count)
        buffer = bytearray(b"".join(self._disk.read_sector(sector) for sector in sectors))
        start = position - base
        buffer[start:start + count] = data[:count]
        size = self._disk.sector_size
        for index, sector in enumerate(sectors):
            self._disk.write_sector(sector, bytes(buffer[index * size:(index + 1) * size]))
        return count

    def length(self):
        """Return the number of bytes in the file."""
        return self._header.file_length()