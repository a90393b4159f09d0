"""Base classes for session normalizers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from log_reader import LogFile
from session_parser import project_name_from_dir


@dataclass(frozen=True)
class TokenUsage:
    """Token counts for a session, project or day."""
    input: int = 0
    output: int = 0
    cache_read: int = 0
    cache_write: int = 0

    def __add__(self, other: TokenUsage) -> TokenUsage:
        return TokenUsage(
            input=self.input + other.input,
            output=self.output + other.output,
            cache_read=self.cache_read + other.cache_read,
            cache_write=self.cache_write + other.cache_write,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "input": self.input,
            "output": self.output,
            "cacheRead": self.cache_read,
            "cacheWrite": self.cache_write,
        }


@dataclass(frozen=True)
class MessageCounts:
    total: int = 0
    user: int = 0
    assistant: int = 0
    tool_result: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "user": self.user,
            "assistant": self.assistant,
            "toolResult": self.tool_result,
        }


@dataclass(frozen=True)
class Session:
    """Source-agnostic summary of one session log file."""
    project: str
    start_time: str | None = None
    message_counts: MessageCounts = field(default_factory=MessageCounts)
    cost: float = 0.0
    tokens: TokenUsage = field(default_factory=TokenUsage)
    duration_minutes: float = 0.0
    models: tuple[str, ...] = ()
    thinking_levels: tuple[str, ...] = ()
    user_message_timestamps: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": self.project,
            "startTime": self.start_time,
            "messages": self.message_counts.to_dict(),
            "cost": self.cost,
            "tokens": self.tokens.to_dict(),
            "durationMinutes": self.duration_minutes,
            "models": list(self.models),
            "thinkingLevels": list(self.thinking_levels),
            "userMessageTimestamps": list(self.user_message_timestamps),
        }


class SessionNormalizer(ABC):
    """Base class for source-specific session log normalization."""

    # Whether this source reports cost itself or it is derived from tokens
    cost_estimated: bool = False

    @abstractmethod
    def normalize(self, events: list[dict[str, Any]], project: str) -> Session:
        """
        Fold the events of one log file into a Session.

        Args:
            events: Decoded events in file order
            project: Resolved project name

        Returns:
            Session with every numeric field populated (zero when absent)
        """
        pass

    def normalize_files(self, log_files: Iterable[LogFile]) -> list[Session]:
        """Normalize each log file into exactly one Session."""
        return [
            self.normalize(log_file.events, project_name_from_dir(log_file.project_dir))
            for log_file in log_files
        ]
