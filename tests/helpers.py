"""Helper utilities for tests."""

from typing import Iterable

from cli.input_source import InputSource


class ScriptedInput(InputSource):
    """Input source that replays a fixed list of lines.

    Raises EOFError once the script is exhausted, like a closed stdin.
    """

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.consumed = 0

    def read_line(self) -> str:
        if self.consumed >= len(self.lines):
            raise EOFError("script exhausted")
        line = self.lines[self.consumed]
        self.consumed += 1
        return line
