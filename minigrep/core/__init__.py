"""
Core - Domain logic and ports

This package contains:
- domain.py: Config and SearchResult models
- search.py: Pure line search functions
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import Config, ConfigError, SearchResult, ignore_case_from_env
from .search import iter_lines, search, search_case_insensitive
from .ports import ContentReader, LineWriter
from .services import SearchFileService, RunService

__all__ = [
    # Domain models
    "Config",
    "ConfigError",
    "SearchResult",
    "ignore_case_from_env",
    # Search
    "iter_lines",
    "search",
    "search_case_insensitive",
    # Ports
    "ContentReader",
    "LineWriter",
    # Services
    "SearchFileService",
    "RunService",
]
