from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional

class LogLevel(IntEnum):
    """Severity of a run log entry. Ordered, so filtering is an ordinal compare."""
    DEBUG = 0    # granular, mostly for debugging
    INFO = 1     # general information
    WARNING = 2  # worth a look, not fatal
    ERROR = 3    # the case could not proceed

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        """Accept a member name or its label, any case: 'warning', 'WARN', 'Info'."""
        key = text.strip().upper()
        for level in cls:
            if key in (level.name, level.label):
                return level
        raise ValueError(f"Unknown log level {text!r}; expected one of: {', '.join(lv.label for lv in cls)}")

_LABELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
}

class Verdict(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"

@dataclass(frozen=True)
class LogEntry:
    level: LogLevel
    message: str

    def format(self) -> str:
        return f"[{self.level.label}] {self.message}"

class RunLogger:
    """
    Buffer of leveled messages for a single test case, plus its verdict.
    Not shared between cases; each case execution owns its own instance.
    """

    def __init__(self):
        self._entries: List[LogEntry] = []
        self._verdict: Optional[Verdict] = None

    # ---------- verdict ----------
    @property
    def verdict(self) -> Optional[Verdict]:
        return self._verdict

    def set_verdict(self, verdict: Verdict) -> None:
        # last write wins, any transition allowed
        self._verdict = verdict

    def mark_success(self) -> None:
        self.set_verdict(Verdict.SUCCESS)

    def mark_fail(self) -> None:
        self.set_verdict(Verdict.FAILURE)

    def mark_skipped(self) -> None:
        self.set_verdict(Verdict.SKIPPED)

    # ---------- logging ----------
    def log(self, level: LogLevel, message: str) -> None:
        self._entries.append(LogEntry(level, message))

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def entry_count(self) -> int:
        return len(self._entries)

    def flush(self, min_level: LogLevel = LogLevel.DEBUG) -> List[str]:
        """
        Return formatted entries at or above min_level, in append order, and
        clear the buffer. Entries below min_level are dropped, not kept back.
        """
        res = [e.format() for e in self._entries if e.level >= min_level]
        self._entries = []
        return res
