"""Claude Code session normalizer (cost estimated from token counts)."""

from __future__ import annotations

from typing import Any

from config import TokenRates
from session_parser import (
    distinct,
    format_utc,
    get_dict,
    span_minutes,
    timestamp_bounds,
    token_count,
)
from .base import MessageCounts, Session, SessionNormalizer, TokenUsage

# Content markers of slash-command echoes, not genuine user input
COMMAND_MARKERS = ("<command-name>", "<local-command-stdout>")


def estimate_cost(tokens: TokenUsage, rates: TokenRates) -> float:
    """Estimate USD cost from token counts using per-million-token rates."""
    return (
        tokens.input * rates.input
        + tokens.output * rates.output
        + tokens.cache_read * rates.cache_read
        + tokens.cache_write * rates.cache_write
    ) / 1_000_000


def _plain_text(content: Any) -> str:
    """String content, or the plain-string items of list content.

    Structured blocks (text, tool_result, ...) are not inspected.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return ",".join(item for item in content if isinstance(item, str))
    return ""


def is_real_user_message(event: dict) -> bool:
    """True for user events typed by a person (not meta, not command output)."""
    if event.get("type") != "user" or event.get("isMeta"):
        return False
    text = _plain_text(get_dict(event, "message").get("content"))
    return not any(marker in text for marker in COMMAND_MARKERS)


def is_assistant_reply(event: dict) -> bool:
    return event.get("type") == "assistant" and not event.get("isApiErrorMessage")


# Event kinds that are conversation messages (before any filtering)
MESSAGE_TYPES = ("user", "assistant")


class ClaudeNormalizer(SessionNormalizer):
    """Normalizer for Claude Code project logs.

    Claude Code does not log cost, so it is estimated from the summed
    token usage with a fixed rate table.
    """

    cost_estimated = True

    def __init__(self, rates: TokenRates | None = None):
        self.rates = rates or TokenRates()

    def normalize(self, events: list[dict[str, Any]], project: str) -> Session:
        user_messages = [e for e in events if is_real_user_message(e)]
        assistant_messages = [e for e in events if is_assistant_reply(e)]

        input_tokens = output_tokens = cache_read = cache_write = 0
        for a in assistant_messages:
            usage = get_dict(get_dict(a, "message"), "usage")
            input_tokens += token_count(usage.get("input_tokens"))
            output_tokens += token_count(usage.get("output_tokens"))
            cache_read += token_count(usage.get("cache_read_input_tokens"))
            cache_write += token_count(usage.get("cache_creation_input_tokens"))
        tokens = TokenUsage(
            input=input_tokens,
            output=output_tokens,
            cache_read=cache_read,
            cache_write=cache_write,
        )

        # Any event kind counts toward the session span
        start, end = timestamp_bounds(e.get("timestamp") for e in events)

        return Session(
            project=project,
            start_time=format_utc(start) if start else None,
            message_counts=MessageCounts(
                total=sum(1 for e in events if e.get("type") in MESSAGE_TYPES),
                user=len(user_messages),
                assistant=len(assistant_messages),
                tool_result=0,
            ),
            cost=estimate_cost(tokens, self.rates),
            tokens=tokens,
            duration_minutes=span_minutes(start, end),
            models=distinct(get_dict(a, "message").get("model") for a in assistant_messages),
            thinking_levels=(),
            user_message_timestamps=tuple(
                m["timestamp"] for m in user_messages
                if isinstance(m.get("timestamp"), str) and m["timestamp"]
            ),
        )
