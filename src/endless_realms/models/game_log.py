"""Bounded narrated event log consumed by the presentation layer."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from endless_realms.models.enums import LogCategory


class LogEntry(BaseModel):
    """A single narrated event."""

    model_config = ConfigDict(frozen=True)

    message: str
    category: LogCategory = Field(default=LogCategory.INFO)
    timestamp: datetime = Field(default_factory=datetime.now)


class GameLog(BaseModel):
    """Most-recent-first ring buffer of log entries.

    Once capacity is reached the oldest entries are dropped silently.
    """

    model_config = ConfigDict(validate_assignment=True)

    capacity: int = Field(default=30, ge=1)
    entries: list[LogEntry] = Field(default_factory=list)

    def add(self, message: str, category: LogCategory = LogCategory.INFO) -> LogEntry:
        """Record an event at the front of the log.

        Args:
            message: Player-facing text.
            category: Display category.

        Returns:
            The stored entry.
        """
        entry = LogEntry(message=message, category=category)
        self.entries.insert(0, entry)
        del self.entries[self.capacity :]
        return entry

    def messages(self) -> list[str]:
        """Entry messages, newest first."""
        return [entry.message for entry in self.entries]

    def clear(self) -> None:
        self.entries.clear()


__all__ = [
    "LogEntry",
    "GameLog",
]
