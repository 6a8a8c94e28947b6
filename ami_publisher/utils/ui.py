import sys
from typing import Protocol, TextIO


class Ui(Protocol):
    def say(self, message: str) -> None: ...

    def message(self, message: str) -> None: ...


class ConsoleUi:
    """Writes progress text the way a build tool shows post-processor output."""

    def __init__(self, writer: TextIO | None = None):
        self.writer: TextIO = writer if writer is not None else sys.stdout

    def say(self, message: str) -> None:
        self._write(f"==> {message}")

    def message(self, message: str) -> None:
        self._write(f"    {message}")

    def _write(self, line: str) -> None:
        self.writer.write(line + "\n")
        self.writer.flush()
