"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging

from .domain import Config, SearchResult
from .ports import ContentReader, LineWriter
from .search import search, search_case_insensitive

logger = logging.getLogger(__name__)


class SearchFileService:
    """Use case: Load a file and find the lines matching a query"""

    def __init__(self, reader: ContentReader):
        self.reader = reader

    def execute(self, config: Config) -> SearchResult:
        """
        Read config.file_path and search it.

        Read errors propagate unchanged to the caller.
        """
        contents = self.reader.read(config.file_path)
        logger.debug(f"read {len(contents)} chars from {config.file_path}")

        if config.ignore_case:
            lines = search_case_insensitive(config.query, contents)
        else:
            lines = search(config.query, contents)

        logger.info(
            f"search {config.query!r} in {config.file_path} "
            f"(ignore_case={config.ignore_case}): {len(lines)} matches"
        )
        return SearchResult(
            query=config.query,
            file_path=config.file_path,
            ignore_case=config.ignore_case,
            lines=lines
        )


class RunService:
    """Use case: Search a file and print every matching line"""

    def __init__(self, search_service: SearchFileService, writer: LineWriter):
        self.search_service = search_service
        self.writer = writer

    def execute(self, config: Config) -> SearchResult:
        # Whole file is loaded before anything is written
        result = self.search_service.execute(config)
        for line in result.lines:
            self.writer.write_line(line)
        return result
