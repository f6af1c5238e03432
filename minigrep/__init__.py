"""
minigrep - print the lines of a file that contain a query

    minigrep QUERY FILE_PATH

Set IGNORE_CASE (to any value) for case-insensitive matching.
"""
from .core import (
    Config,
    ConfigError,
    SearchResult,
    search,
    search_case_insensitive,
)

__version__ = "0.1.0"


def run(config: Config) -> SearchResult:
    """Search config.file_path and print matching lines to stdout"""
    from .container import Container

    return Container().run.execute(config)


__all__ = [
    "Config",
    "ConfigError",
    "SearchResult",
    "run",
    "search",
    "search_case_insensitive",
]
