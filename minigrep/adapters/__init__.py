"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: File reader
- output.py: Stream and in-memory line writers
"""
from .filesystem import FilesystemReader
from .output import StreamWriter, CollectingWriter

__all__ = [
    "FilesystemReader",
    "StreamWriter",
    "CollectingWriter",
]
