"""
Helpers shared by the session normalizers.

Project name decoding, defensive field access and timestamp handling
for raw JSONL events. Nothing here raises on missing or odd fields.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

# Parent folder of the actual project in encoded directory names
PROJECT_ANCHOR = "Sites"
PATH_DELIMITER = "-"


def project_name_from_dir(dir_name: str) -> str:
    """Convert an encoded project dir name to a readable project name.

    Examples:
      '--Users-vincentb-Sites-got--' -> 'got'
      '-Users-vincentb-Sites-openclaw-channel-cqlaw' -> 'openclaw-channel-cqlaw'
      '-home-pi-TP' -> 'TP'

    Lossy: a project named 'foo-bar' is only recovered whole when it sits
    directly under the anchor folder.
    """
    parts = dir_name.strip(PATH_DELIMITER).split(PATH_DELIMITER)
    anchor_idx = _last_index(parts, PROJECT_ANCHOR)
    if anchor_idx is not None and anchor_idx < len(parts) - 1:
        return PATH_DELIMITER.join(parts[anchor_idx + 1:])
    return parts[-1]


def _last_index(parts: list[str], value: str) -> Optional[int]:
    for i in range(len(parts) - 1, -1, -1):
        if parts[i] == value:
            return i
    return None


def get_dict(obj: Any, key: str) -> dict:
    """obj[key] if it is a dict, else an empty dict."""
    if isinstance(obj, dict):
        value = obj.get(key)
        if isinstance(value, dict):
            return value
    return {}


def token_count(value: Any) -> int:
    """Coerce a raw token field to a non-negative int; anything else is 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(int(value), 0)


def money(value: Any) -> float:
    """Coerce a raw cost field to a non-negative float; anything else is 0.0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return max(float(value), 0.0)


def parse_timestamp(ts: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; None when missing or unparseable.

    Naive timestamps are left naive (interpreted as local time by callers).
    """
    if not isinstance(ts, str) or not ts:
        return None
    try:
        return datetime.fromisoformat(ts.replace("Z", "+00:00"))
    except ValueError:
        return None


def _as_utc(dt: datetime) -> datetime:
    # astimezone() on a naive datetime assumes local time
    return dt.astimezone(timezone.utc)


def timestamp_bounds(timestamps: Iterable[Any]) -> tuple[Optional[datetime], Optional[datetime]]:
    """Earliest and latest parseable timestamp, as aware UTC datetimes."""
    parsed = [_as_utc(dt) for dt in map(parse_timestamp, timestamps) if dt]
    if not parsed:
        return None, None
    return min(parsed), max(parsed)


def span_minutes(start: Optional[datetime], end: Optional[datetime]) -> float:
    """Minutes between two datetimes, 0.0 when either is missing."""
    if start is None or end is None:
        return 0.0
    return (end - start).total_seconds() / 60


def format_utc(dt: datetime) -> str:
    """Render as '2025-06-01T10:00:00.000Z'."""
    return _as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def distinct(values: Iterable[Any]) -> tuple:
    """Distinct non-empty values in first-seen order."""
    seen: dict[Any, None] = {}
    for value in values:
        if value is None or value == "":
            continue
        if isinstance(value, (list, dict)):
            continue
        seen.setdefault(value, None)
    return tuple(seen)
