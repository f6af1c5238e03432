"""
Filesystem Reader Adapter

Implements ContentReader port using the local filesystem.
"""
from pathlib import Path

from ..core.ports import ContentReader


class FilesystemReader(ContentReader):
    """Reads whole files as UTF-8 text"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, file_path: str) -> str:
        """Read file contents; CRLF and CR are translated to LF"""
        return Path(file_path).read_text(encoding=self.encoding)
