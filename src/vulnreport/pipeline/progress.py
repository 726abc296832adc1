"""
Progress and log notification for one pipeline run.

The pipeline reports each completed stage to an observer passed in by the
caller. Notifications are one-way; the pipeline never reads them back.
"""

import threading
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class LogLevel(Enum):
    """Level of a user-facing log message."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class LogMessage:
    """A user-facing log line with its wall-clock time (HH:MM:SS)."""

    level: LogLevel
    message: str
    timestamp: str


@dataclass(frozen=True)
class ProgressInfo:
    """Latest progress state of a run."""

    current: int
    total: int
    message: str

    @property
    def percentage(self) -> float:
        """Completion in percent, 0 when the total is unknown."""
        return (self.current / self.total) * 100.0 if self.total > 0 else 0.0


class ProgressObserver(Protocol):
    """Receiver of stage and log notifications."""

    def stage_completed(self, stage: str, current: int, total: int, message: str) -> None:
        """Called after each pipeline stage."""
        ...

    def log(self, level: LogLevel, message: str) -> None:
        """Called with user-facing messages."""
        ...


class NullObserver:
    """Observer that ignores all notifications."""

    def stage_completed(self, stage: str, current: int, total: int, message: str) -> None:
        pass

    def log(self, level: LogLevel, message: str) -> None:
        pass


class ProgressRecorder:
    """
    In-memory log and progress register for a single run.

    Safe to share with a UI thread polling `logs` and `progress` while the
    run is in flight.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._logs: list[LogMessage] = []
        self._progress: ProgressInfo | None = None
        self.stages: list[str] = []

    def stage_completed(self, stage: str, current: int, total: int, message: str) -> None:
        with self._lock:
            self.stages.append(stage)
            self._progress = ProgressInfo(current=current, total=total, message=message)

    def log(self, level: LogLevel, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        with self._lock:
            self._logs.append(LogMessage(level=level, message=message, timestamp=timestamp))

    @property
    def logs(self) -> list[LogMessage]:
        """Snapshot of recorded messages, oldest first."""
        with self._lock:
            return list(self._logs)

    @property
    def progress(self) -> ProgressInfo | None:
        """Most recent progress state, or None before the first stage."""
        with self._lock:
            return self._progress

    def clear_logs(self) -> None:
        with self._lock:
            self._logs.clear()

    def clear_progress(self) -> None:
        with self._lock:
            self._progress = None
