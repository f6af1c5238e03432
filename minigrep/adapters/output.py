"""
Output Adapter

Implements LineWriter port on top of a text stream.
"""
import sys
from typing import Optional, TextIO

from ..core.ports import LineWriter


class StreamWriter(LineWriter):
    """Writes lines to a stream (stdout when none is given)"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write_line(self, line: str) -> None:
        # Resolve stdout lazily so redirection after construction is honoured
        print(line, file=self.stream or sys.stdout)


class CollectingWriter(LineWriter):
    """Keeps written lines in memory"""

    def __init__(self):
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)
