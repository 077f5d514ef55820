"""Selective debug messages, switched on by single-character flags."""

import sys

DBG_ALL = "+"
DBG_THREAD = "t"
DBG_SYNCH = "s"
DBG_INT = "i"
DBG_MACH = "m"
DBG_DISK = "d"
DBG_FILE = "f"
DBG_ADDR = "a"
DBG_NET = "n"
DBG_SYS = "u"
DBG_TRACE_CODE = "c"


class Debug:
    """Decides which debug messages are printed.

    ``flags`` is a string of enabled flag characters, or None for none;
    the flag ``+`` enables every message.
    """

    def __init__(self, flags):
        self._flags = flags

    @property
    def flags(self):
        return self._flags

    def is_enabled(self, flag):
        """Return True if messages tagged with ``flag`` are to be printed."""
        if self._flags is None:
            return False
        return flag in self._flags or DBG_ALL in self._flags

    def log(self, flag, message):
        """Print ``message`` to standard error if ``flag`` is enabled."""
        if self.is_enabled(flag):
            print(message, file=sys.stderr)