"""Teaching toolkit: kernel data structures, stacks and a flat file system on a simulated disk."""

__version__ = "0.1.0"

__all__ = [
    "bitmap",
    "debug",
    "intlist",
    "pbitmap",
    "linkedlist",
    "disk",
    "hashtable",
    "libtest",
    "templatestack",
    "stacks",
    "filehdr",
    "openfile",
    "directory",
    "filesys",
]