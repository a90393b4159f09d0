"""pi session normalizer (reports cost per assistant message)."""

from __future__ import annotations

from typing import Any

from session_parser import (
    distinct,
    get_dict,
    money,
    span_minutes,
    timestamp_bounds,
    token_count,
)
from .base import MessageCounts, Session, SessionNormalizer, TokenUsage


class PiNormalizer(SessionNormalizer):
    """Normalizer for pi agent logs.

    Event kinds: session, message (role user/assistant/toolResult),
    model_change and thinking_level_change. Other kinds are ignored.
    """

    cost_estimated = False

    def normalize(self, events: list[dict[str, Any]], project: str) -> Session:
        session_event = next((e for e in events if e.get("type") == "session"), None)
        messages = [e for e in events if e.get("type") == "message"]

        by_role: dict[str, list[dict]] = {"user": [], "assistant": [], "toolResult": []}
        for m in messages:
            role = get_dict(m, "message").get("role")
            if role in by_role:
                by_role[role].append(m)

        cost = 0.0
        input_tokens = output_tokens = cache_read = cache_write = 0
        for m in by_role["assistant"]:
            usage = get_dict(get_dict(m, "message"), "usage")
            cost += money(get_dict(usage, "cost").get("total"))
            input_tokens += token_count(usage.get("input"))
            output_tokens += token_count(usage.get("output"))
            cache_read += token_count(usage.get("cacheRead"))
            cache_write += token_count(usage.get("cacheWrite"))

        start, end = timestamp_bounds(m.get("timestamp") for m in messages)

        start_time = session_event.get("timestamp") if session_event else None
        if not isinstance(start_time, str) or not start_time:
            start_time = None

        return Session(
            project=project,
            start_time=start_time,
            message_counts=MessageCounts(
                total=len(messages),
                user=len(by_role["user"]),
                assistant=len(by_role["assistant"]),
                tool_result=len(by_role["toolResult"]),
            ),
            cost=cost,
            tokens=TokenUsage(
                input=input_tokens,
                output=output_tokens,
                cache_read=cache_read,
                cache_write=cache_write,
            ),
            duration_minutes=span_minutes(start, end),
            models=distinct(
                e.get("modelId") for e in events if e.get("type") == "model_change"
            ),
            thinking_levels=distinct(
                e.get("thinkingLevel") for e in events
                if e.get("type") == "thinking_level_change"
            ),
            user_message_timestamps=tuple(
                m["timestamp"] for m in by_role["user"]
                if isinstance(m.get("timestamp"), str) and m["timestamp"]
            ),
        )
