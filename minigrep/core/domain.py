"""
Domain Models - Pure business entities

No external dependencies beyond the process environment lookup.
"""
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Optional

# Presence of this variable (any value, even empty) turns on case-insensitive search
IGNORE_CASE_VAR = "IGNORE_CASE"


class ConfigError(ValueError):
    """Raised when the command line is missing a required argument"""


def ignore_case_from_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether IGNORE_CASE is set (value is ignored)"""
    if environ is None:
        environ = os.environ
    return IGNORE_CASE_VAR in environ


@dataclass(frozen=True)
class Config:
    """What to search for, where, and whether case matters"""
    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def build(
        cls,
        args: Iterable[str],
        environ: Optional[Mapping[str, str]] = None
    ) -> "Config":
        """
        Build a Config from a raw argument vector.

        The first element is the program name and is skipped. Arguments
        after the file path are ignored.
        """
        it = iter(args)
        next(it, None)  # program name

        query = next(it, None)
        if query is None:
            raise ConfigError("Didn't get a query string")

        file_path = next(it, None)
        if file_path is None:
            raise ConfigError("Didn't get a file path")

        return cls(
            query=query,
            file_path=file_path,
            ignore_case=ignore_case_from_env(environ)
        )


@dataclass
class SearchResult:
    """Matching lines from one file, in file order"""
    query: str
    file_path: str
    ignore_case: bool
    lines: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.lines)
