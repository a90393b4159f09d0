"""
Read agent session logs from a sessions root directory.

Layout: <root>/<encoded-project-dir>/<session>.jsonl, one JSON event per
line. Any undecodable line aborts the read; the caller decides how to
report it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

LOG_SUFFIX = ".jsonl"

logger = logging.getLogger("agent-stats")


class MalformedLogError(ValueError):
    """A session log line is not valid JSON."""

    def __init__(self, path: Path, lineno: int, reason: str):
        self.path = path
        self.lineno = lineno
        self.reason = reason
        super().__init__(f"Malformed log line {path}:{lineno}: {reason}")


@dataclass
class LogFile:
    """All events of one session log, plus the project dir it came from."""
    project_dir: str
    path: Path
    events: list[dict[str, Any]] = field(default_factory=list)


def iter_jsonl(path: Path) -> Iterable[tuple[int, dict[str, Any]]]:
    """
    Iterate over JSONL file line-by-line, yielding (lineno, parsed_object).

    Blank lines and lines holding a JSON scalar or array are skipped.
    Undecodable bytes are replaced with U+FFFD. Raises MalformedLogError
    on the first line that is not valid JSON.
    """
    with path.open("r", encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError as e:
                raise MalformedLogError(path, lineno, e.msg) from e
            if not isinstance(obj, dict):
                logger.debug("Skipping non-object line %s:%d", path, lineno)
                continue
            yield lineno, obj


def read_events(path: Path) -> list[dict[str, Any]]:
    """Decode every event in a session log, in file order."""
    return [obj for _lineno, obj in iter_jsonl(path)]


def find_project_dirs(root: Path) -> list[Path]:
    """Immediate subdirectories of root, sorted by name. Stray files are skipped."""
    return sorted(p for p in root.iterdir() if p.is_dir())


def find_session_files(project_dir: Path) -> list[Path]:
    """Session logs directly inside a project directory."""
    return sorted(
        p for p in project_dir.iterdir()
        if p.name.endswith(LOG_SUFFIX) and p.is_file()
    )


def read_session_logs(root: Path) -> list[LogFile]:
    """
    Read every session log under root.

    Returns [] when root does not exist so callers can treat a missing
    source as "no data". Unreadable files and malformed lines propagate.
    """
    if not root.exists():
        return []

    log_files: list[LogFile] = []
    for project_dir in find_project_dirs(root):
        for path in find_session_files(project_dir):
            log_files.append(LogFile(
                project_dir=project_dir.name,
                path=path,
                events=read_events(path),
            ))
    return log_files
