"""Sample session logs and file helpers shared by the tests."""

import json
from pathlib import Path


def write_jsonl(path: Path, events: list) -> Path:
    """Write events as one JSON object per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(json.dumps(e) for e in events) + "\n")
    return path


# ---------------------------------------------------------------------------
# Sample pi session (cost reported per assistant message)
# ---------------------------------------------------------------------------
PI_PROJECT_DIR = "--Users-vincentb-Sites-got--"

PI_SESSION_EVENTS = [
    {"type": "session", "id": "pi-001", "timestamp": "2025-06-01T10:00:00.000Z"},
    {"type": "model_change", "modelId": "claude-sonnet-4-5", "timestamp": "2025-06-01T10:00:01.000Z"},
    {"type": "thinking_level_change", "thinkingLevel": "high", "timestamp": "2025-06-01T10:00:02.000Z"},
    {
        "type": "message",
        "timestamp": "2025-06-01T10:00:05.000Z",
        "message": {"role": "user", "content": [{"type": "text", "text": "Add a CLI"}]},
    },
    {
        "type": "message",
        "timestamp": "2025-06-01T10:00:35.000Z",
        "message": {
            "role": "assistant",
            "content": [{"type": "text", "text": "Sure."}],
            "usage": {
                "input": 100,
                "output": 50,
                "cacheRead": 1000,
                "cacheWrite": 200,
                "cost": {"total": 0.0125},
            },
        },
    },
    {
        "type": "message",
        "timestamp": "2025-06-01T10:01:00.000Z",
        "message": {"role": "toolResult", "content": "ok"},
    },
    {"type": "thinking_level_change", "thinkingLevel": "high"},
    {"type": "model_change", "modelId": "gpt-5"},
    {
        "type": "message",
        "timestamp": "2025-06-01T10:20:00.000Z",
        "message": {"role": "user", "content": "Now add tests"},
    },
    {
        "type": "message",
        "timestamp": "2025-06-01T10:30:05.000Z",
        "message": {
            "role": "assistant",
            "content": "Done.",
            "usage": {"input": 200, "output": 100, "cost": {"total": 0.0075}},
        },
    },
]


# ---------------------------------------------------------------------------
# Sample Claude Code session (cost estimated from tokens)
# ---------------------------------------------------------------------------
CLAUDE_PROJECT_DIR = "-Users-vincentb-Sites-openclaw-channel-cqlaw"

CLAUDE_SESSION_EVENTS = [
    {"type": "summary", "summary": "Bug fix", "leafUuid": "x"},
    {
        "type": "user",
        "timestamp": "2025-06-02T09:00:00.000Z",
        "message": {"role": "user", "content": "Fix the bug"},
    },
    {
        "type": "user",
        "isMeta": True,
        "timestamp": "2025-06-02T09:00:01.000Z",
        "message": {"role": "user", "content": "Caveat: local commands follow"},
    },
    {
        "type": "user",
        "timestamp": "2025-06-02T09:00:02.000Z",
        "message": {"role": "user", "content": "<command-name>/clear</command-name>"},
    },
    {
        "type": "user",
        "timestamp": "2025-06-02T09:00:03.000Z",
        "message": {"role": "user", "content": "<local-command-stdout></local-command-stdout>"},
    },
    {
        "type": "assistant",
        "timestamp": "2025-06-02T09:01:00.000Z",
        "message": {
            "role": "assistant",
            "model": "claude-sonnet-4-5",
            "usage": {
                "input_tokens": 1000,
                "output_tokens": 500,
                "cache_read_input_tokens": 2000,
                "cache_creation_input_tokens": 400,
            },
            "content": [{"type": "text", "text": "Looking."}],
        },
    },
    {
        "type": "assistant",
        "isApiErrorMessage": True,
        "timestamp": "2025-06-02T09:02:00.000Z",
        "message": {
            "role": "assistant",
            "model": "<synthetic>",
            "usage": {"input_tokens": 999, "output_tokens": 999},
            "content": [{"type": "text", "text": "API Error"}],
        },
    },
    {
        "type": "user",
        "timestamp": "2025-06-02T09:03:00.000Z",
        "message": {
            "role": "user",
            "content": [{"type": "tool_result", "tool_use_id": "tu_1", "content": "ok"}],
        },
    },
    {
        "type": "assistant",
        "timestamp": "2025-06-02T09:10:00.000Z",
        "message": {
            "role": "assistant",
            "model": "claude-opus-4-1",
            "usage": {"output_tokens": 100},
            "content": [{"type": "text", "text": "Fixed."}],
        },
    },
    {"type": "system", "subtype": "turn_duration", "timestamp": "2025-06-02T09:15:00.000Z"},
]
