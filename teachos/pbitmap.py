"""Bitmaps that can be stored in and fetched from a file."""

from teachos.bitmap import Bitmap


class PersistentBitmap(Bitmap):
    """A bitmap that can be read from and written to an open file.

    The file needs ``read_at(num_bytes, position)`` returning bytes and
    ``write_at(data, position)``.  If ``file`` is given, the bitmap is
    initialised from it.
    """

    def __init__(self, num_items, file=None):
        super().__init__(num_items)
        if file is not None:
            self.fetch_from(file)

    def fetch_from(self, file):
        """Load the bitmap's contents from the start of ``file``."""
        self.load_bytes(file.read_at(self.size_in_bytes, 0))

    def write_back(self, file):
        """Store the bitmap's contents at the start of ``file``."""
        file.write_at(self.to_bytes(), 0)