"""
# Log Collection

Loading is handed a `Logger` to record into, rather than writing to a process-wide log,
so that callers (the editor's log view, or tests) decide where messages go.
"""

from enum import Enum
from typing import List

from pydantic.dataclasses import dataclass


class Level(Enum):
    ERROR = "e"
    WARN = "w"
    INFO = "i"
    DEBUG = "d"

    @property
    def marker(self) -> str:
        return f"[{self.value}]"


@dataclass
class LogItem:
    """Logged message, split into its lines"""

    level: Level
    lines: List[str]

    def __str__(self) -> str:
        return "\n".join(f"{self.level.marker} {line}" for line in self.lines)


class Logger:
    """Log Collector"""

    def __init__(self):
        self.items: List[LogItem] = []

    def log(self, msg: str, level: Level) -> None:
        self.items.append(LogItem(level, str(msg).split("\n")))

    def error(self, msg: str) -> None:
        self.log(msg, Level.ERROR)

    def warn(self, msg: str) -> None:
        self.log(msg, Level.WARN)

    def info(self, msg: str) -> None:
        self.log(msg, Level.INFO)

    def debug(self, msg: str) -> None:
        self.log(msg, Level.DEBUG)

    def messages(self, level: Level) -> List[str]:
        """All messages logged at `level`, one entry per logged message."""
        return ["\n".join(item.lines) for item in self.items if item.level == level]

    def clear(self) -> None:
        self.items.clear()
