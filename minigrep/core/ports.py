"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod


class ContentReader(ABC):
    """Port for loading a file's contents"""

    @abstractmethod
    def read(self, file_path: str) -> str:
        """Read the whole file as text; raise OSError/UnicodeDecodeError on failure"""
        pass


class LineWriter(ABC):
    """Port for emitting result lines"""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one line followed by a line terminator"""
        pass
