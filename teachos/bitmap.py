"""Fixed-size bitmaps: arrays of bits that can be set, cleared and tested."""

BITS_IN_BYTE = 8
BITS_IN_WORD = 32
_BYTES_IN_WORD = BITS_IN_WORD // BITS_IN_BYTE


def div_round_down(n, s):
    """Divide ``n`` by ``s``, rounding the quotient down."""
    return n // s


def div_round_up(n, s):
    """Divide ``n`` by ``s``, rounding the quotient up."""
    return -(-n // s)


def _require(condition, message):
    if not condition:
        raise AssertionError(message)


class Bitmap:
    """A fixed number of bits, all clear to begin with.

    Bits are stored in 32-bit words; the serialised form is those words
    in little-endian order, so bit ``i`` lives in byte ``i // 8``.
    """

    def __init__(self, num_items):
        if num_items <= 0:
            raise ValueError(f"a bitmap needs at least one bit, got {num_items}")
        self._num_bits = num_items
        self._num_words = div_round_up(num_items, BITS_IN_WORD)
        self._bits = 0

    @property
    def num_bits(self):
        """Number of bits managed by the bitmap."""
        return self._num_bits

    @property
    def num_words(self):
        """Number of 32-bit words of storage behind the bitmap."""
        return self._num_words

    @property
    def size_in_bytes(self):
        """Length of the serialised bitmap."""
        return self._num_words * _BYTES_IN_WORD

    def __len__(self):
        return self._num_bits

    def _check_index(self, which):
        if not 0 <= which < self._num_bits:
            raise IndexError(
                f"bit {which} out of range for a bitmap of {self._num_bits} bits"
            )

    def mark(self, which):
        """Set bit ``which``."""
        self._check_index(which)
        self._bits |= 1 << which

    def clear(self, which):
        """Clear bit ``which``."""
        self._check_index(which)
        self._bits &= ~(1 << which)

    def test(self, which):
        """Return True if bit ``which`` is set."""
        self._check_index(which)
        return bool((self._bits >> which) & 1)

    def _mask(self):
        return (1 << self._num_bits) - 1

    def find_and_set(self):
        """Set the lowest clear bit and return its number, or None if all are set."""
        free = ~self._bits & self._mask()
        if not free:
            return None
        which = (free & -free).bit_length() - 1
        self.mark(which)
        return which

    def num_clear(self):
        """Return how many bits are clear."""
        return self._num_bits - (self._bits & self._mask()).bit_count()

    def _set_bits(self):
        return (i for i in range(self._num_bits) if (self._bits >> i) & 1)

    def describe(self):
        """Return a listing of the numbers of all set bits."""
        listed = "".join(f"{i}, " for i in self._set_bits())
        return f"Bitmap set:\n{listed}\n"

    def to_bytes(self):
        """Serialise the bitmap's word storage."""
        return self._bits.to_bytes(self.size_in_bytes, "little")

    def load_bytes(self, data):
        """Overwrite the leading storage bytes with ``data``.

        Bytes past the end of ``data`` keep their current value; bytes past
        the end of the storage are ignored.
        """
        storage = bytearray(self.to_bytes())
        chunk = bytes(data)[: len(storage)]
        storage[: len(chunk)] = chunk
        self._bits = int.from_bytes(storage, "little")

    def self_test(self):
        """Exercise the bitmap; it must be empty and at least one word long."""
        if self._num_bits < BITS_IN_WORD:
            raise ValueError(
                f"self test needs at least {BITS_IN_WORD} bits, got {self._num_bits}"
            )
        _require(self.num_clear() == self._num_bits, "bitmap must start empty")
        _require(self.find_and_set() == 0, "first free bit should be 0")
        self.mark(31)
        _require(self.test(0) and self.test(31), "bits 0 and 31 should be set")
        _require(self.find_and_set() == 1, "next free bit should be 1")
        self.clear(0)
        self.clear(1)
        self.clear(31)

        for i in range(self._num_bits):
            self.mark(i)
        _require(self.find_and_set() is None, "bitmap should be full")
        for i in range(self._num_bits):
            self.clear(i)