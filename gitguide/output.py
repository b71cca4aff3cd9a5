"""Output sinks for command transcripts.

Handlers report through an OutputSink: ordered, line-oriented, with
separate channels for plain output, errors and successes. Multi-line text
is split so each line is recorded on its own.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.text import Text


class LineKind(Enum):
    """Which channel a transcript line was written to."""
    COMMAND = "command"    # Echo of the entered command
    OUTPUT = "output"
    ERROR = "error"
    SUCCESS = "success"


@dataclass
class TranscriptLine:
    kind: LineKind
    text: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


class OutputSink(Protocol):
    def command(self, text: str) -> None: ...

    def output(self, text: str = "") -> None: ...

    def error(self, text: str) -> None: ...

    def success(self, text: str) -> None: ...

    def clear(self) -> None: ...


class TranscriptBuffer:
    """
    Records transcript lines in memory.

    Usage:
        sink = TranscriptBuffer()
        execute('git status', ctx_with(sink))
        sink.texts(LineKind.ERROR)
    """

    def __init__(self):
        self.lines: list[TranscriptLine] = []

    def _record(self, kind: LineKind, text: str) -> None:
        for line in text.split("\n"):
            self.lines.append(TranscriptLine(kind=kind, text=line))

    def command(self, text: str) -> None:
        self._record(LineKind.COMMAND, text)

    def output(self, text: str = "") -> None:
        self._record(LineKind.OUTPUT, text)

    def error(self, text: str) -> None:
        self._record(LineKind.ERROR, text)

    def success(self, text: str) -> None:
        self._record(LineKind.SUCCESS, text)

    def clear(self) -> None:
        self.lines.clear()

    def texts(self, kind: LineKind | None = None) -> list[str]:
        """Line texts, optionally only those of one kind."""
        return [line.text for line in self.lines if kind is None or line.kind == kind]

    @property
    def text(self) -> str:
        return "\n".join(self.texts())

    def __len__(self) -> int:
        return len(self.lines)


STYLES = {
    LineKind.COMMAND: "bold",
    LineKind.OUTPUT: "",
    LineKind.ERROR: "red",
    LineKind.SUCCESS: "green",
}


class ConsoleSink:
    """Writes transcript lines to the terminal with rich styling."""

    def __init__(self, console: Console | None = None, prompt: str = "$ "):
        self.console = console or Console(highlight=False)
        self.prompt = prompt

    def _print(self, kind: LineKind, text: str) -> None:
        for line in text.split("\n"):
            self.console.print(Text(line, style=STYLES[kind]))

    def command(self, text: str) -> None:
        self._print(LineKind.COMMAND, f"{self.prompt}{text}")

    def output(self, text: str = "") -> None:
        self._print(LineKind.OUTPUT, text)

    def error(self, text: str) -> None:
        self._print(LineKind.ERROR, text)

    def success(self, text: str) -> None:
        self._print(LineKind.SUCCESS, text)

    def clear(self) -> None:
        self.console.clear()
