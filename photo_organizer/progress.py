import sys
from typing import Final, Protocol, TextIO

LINE_UP: Final = "\033[1A"
LINE_CLEAR: Final = "\x1b[2K"


class ProgressReporter(Protocol):
    def report(self, current: int, total: int) -> None: ...


class TerminalProgress:
    """Redraw a single `50% (1/2)` line in place using cursor-control sequences."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def report(self, current: int, total: int) -> None:
        percentage = current * 100 // total if total else 100
        self.stream.write(f"{LINE_UP}{LINE_CLEAR}{percentage}% ({current}/{total})\n")
        self.stream.flush()


class NullProgress:
    def report(self, current: int, total: int) -> None:
        pass
