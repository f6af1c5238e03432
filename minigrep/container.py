"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

from .adapters import FilesystemReader, StreamWriter
from .core import ContentReader, LineWriter, RunService, SearchFileService


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        reader: Optional[ContentReader] = None,
        writer: Optional[LineWriter] = None
    ):
        # Adapters (infrastructure)
        self.reader = reader or FilesystemReader()
        self.writer = writer or StreamWriter()

        # Services (use cases)
        self.search_file = SearchFileService(reader=self.reader)

        self.run = RunService(
            search_service=self.search_file,
            writer=self.writer
        )
