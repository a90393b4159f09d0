"""
Fold normalized sessions into one Statistics aggregate.

Everything is recomputed from the session list on each call; nothing is
cached between calls.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from normalizers.base import Session, TokenUsage
from session_parser import parse_timestamp

logger = logging.getLogger("agent-stats")

DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24


@dataclass(frozen=True)
class ProjectStats:
    """Totals for all sessions of one project."""
    sessions: int = 0
    messages: int = 0
    user_messages: int = 0
    cost: float = 0.0
    tokens: TokenUsage = field(default_factory=TokenUsage)
    duration_minutes: float = 0.0

    def add(self, session: Session) -> ProjectStats:
        return ProjectStats(
            sessions=self.sessions + 1,
            messages=self.messages + session.message_counts.total,
            user_messages=self.user_messages + session.message_counts.user,
            cost=self.cost + session.cost,
            tokens=self.tokens + session.tokens,
            duration_minutes=self.duration_minutes + session.duration_minutes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessions": self.sessions,
            "messages": self.messages,
            "userMessages": self.user_messages,
            "cost": self.cost,
            "tokens": self.tokens.to_dict(),
            "durationMinutes": self.duration_minutes,
        }


@dataclass(frozen=True)
class Summary:
    total_sessions: int = 0
    total_messages: int = 0
    total_user_messages: int = 0
    total_cost: float = 0.0
    active_days: int = 0
    total_duration_minutes: float = 0.0
    projects: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalSessions": self.total_sessions,
            "totalMessages": self.total_messages,
            "totalUserMessages": self.total_user_messages,
            "totalCost": self.total_cost,
            "activeDays": self.active_days,
            "totalDurationMinutes": self.total_duration_minutes,
            "projects": self.projects,
        }


@dataclass(frozen=True)
class Statistics:
    """Aggregate usage statistics for one source.

    punchcard is indexed [day_of_week][hour], day 0 = Sunday, local time.
    Daily maps are keyed by the first 10 characters of the timestamp
    string (its date as written, no timezone conversion).
    """
    summary: Summary
    punchcard: tuple[tuple[int, ...], ...]
    daily_activity: dict[str, int]
    daily_cost: dict[str, float]
    daily_tokens: dict[str, TokenUsage]
    project_stats: dict[str, ProjectStats]
    model_usage: dict[str, int]
    thinking_usage: dict[str, int]
    source: str | None = None
    source_label: str | None = None
    cost_estimated: bool = False

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready payload with the dashboard's camelCase keys."""
        return {
            "summary": self.summary.to_dict(),
            "punchcard": [list(row) for row in self.punchcard],
            "dailyActivity": dict(self.daily_activity),
            "dailyCost": dict(self.daily_cost),
            "dailyTokens": {k: v.to_dict() for k, v in self.daily_tokens.items()},
            "projectStats": {k: v.to_dict() for k, v in self.project_stats.items()},
            "modelUsage": dict(self.model_usage),
            "thinkingUsage": dict(self.thinking_usage),
            "source": self.source,
            "sourceLabel": self.source_label,
            "costEstimated": self.cost_estimated,
        }


def day_key(ts: str) -> str:
    """Calendar-day key of a timestamp string: its first 10 characters, verbatim."""
    return ts[:10]


def punchcard_cell(ts: str) -> tuple[int, int] | None:
    """(day_of_week, hour) of a timestamp in local time, Sunday = 0.

    Returns None for unparseable timestamps.
    """
    dt = parse_timestamp(ts)
    if dt is None:
        return None
    local = dt.astimezone()
    return (local.weekday() + 1) % DAYS_PER_WEEK, local.hour


def _accumulate_activity(
    session: Session, punchcard: list[list[int]], daily_activity: Counter,
) -> None:
    """Bucket a session's user messages by weekday/hour and by day."""
    for ts in session.user_message_timestamps:
        cell = punchcard_cell(ts)
        if cell is None:
            logger.debug("Skipping unparseable user timestamp %r", ts)
            continue
        day, hour = cell
        punchcard[day][hour] += 1
        daily_activity[day_key(ts)] += 1


def _accumulate_daily_usage(
    session: Session, daily_cost: dict[str, float], daily_tokens: dict[str, TokenUsage],
) -> None:
    """Attribute a session's cost and tokens to the day it started."""
    if not session.start_time:
        return
    key = day_key(session.start_time)
    daily_cost[key] = daily_cost.get(key, 0.0) + session.cost
    daily_tokens[key] = daily_tokens.get(key, TokenUsage()) + session.tokens


def build_statistics(
    sessions: list[Session],
    source: str | None = None,
    source_label: str | None = None,
    cost_estimated: bool = False,
) -> Statistics:
    """Aggregate sessions into per-project, per-day and punchcard statistics."""
    punchcard = [[0] * HOURS_PER_DAY for _ in range(DAYS_PER_WEEK)]
    daily_activity: Counter = Counter()
    daily_cost: dict[str, float] = {}
    daily_tokens: dict[str, TokenUsage] = {}
    project_stats: dict[str, ProjectStats] = {}
    model_usage: Counter = Counter()
    thinking_usage: Counter = Counter()

    for session in sessions:
        project_stats[session.project] = project_stats.get(
            session.project, ProjectStats()
        ).add(session)

        # models and thinking levels are already distinct per session
        model_usage.update(session.models)
        thinking_usage.update(session.thinking_levels)

        _accumulate_activity(session, punchcard, daily_activity)
        _accumulate_daily_usage(session, daily_cost, daily_tokens)

    summary = Summary(
        total_sessions=len(sessions),
        total_messages=sum(s.message_counts.total for s in sessions),
        total_user_messages=sum(s.message_counts.user for s in sessions),
        total_cost=sum(s.cost for s in sessions),
        active_days=len(daily_activity),
        total_duration_minutes=sum(s.duration_minutes for s in sessions),
        projects=len(project_stats),
    )

    return Statistics(
        summary=summary,
        punchcard=tuple(tuple(row) for row in punchcard),
        daily_activity=dict(daily_activity),
        daily_cost=daily_cost,
        daily_tokens=daily_tokens,
        project_stats=project_stats,
        model_usage=dict(model_usage),
        thinking_usage=dict(thinking_usage),
        source=source,
        source_label=source_label,
        cost_estimated=cost_estimated,
    )
