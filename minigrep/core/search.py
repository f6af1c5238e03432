"""
Line search

Pure functions over an in-memory text blob. Returned lines are the original
line text, in the order they appear in the contents.
"""
from collections.abc import Iterator


def iter_lines(contents: str) -> Iterator[str]:
    """Yield lines split on LF, dropping one trailing CR from each.

    A final line without a terminator still counts; a trailing terminator
    does not produce an extra empty line.
    """
    if not contents:
        return

    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()

    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def search(query: str, contents: str) -> list[str]:
    """
    Case-sensitive search.

    Example:
        >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.")
        ['safe, fast, productive.']
    """
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """
    Case-insensitive search using full Unicode lowercasing.

    Matching happens on lowercased copies; the original line is returned.

    Example:
        >>> search_case_insensitive("rUsT", "Rust:\\nTrust me.")
        ['Rust:', 'Trust me.']
    """
    query = query.lower()
    results = []
    for line in iter_lines(contents):
        if query in line.lower():
            results.append(line)
    return results
