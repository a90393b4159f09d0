"""
Entry points used by the HTTP app and the CLI.

Each call re-reads the source's logs from disk; no state survives between
calls, so concurrent callers each work on their own snapshot.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from aggregator import Statistics, build_statistics
from config import AppConfig
from log_reader import read_session_logs
from normalizers import UnknownSourceError, create_normalizer_registry, get_normalizer

logger = logging.getLogger("agent-stats")


def list_available_sources(config: AppConfig) -> list[dict[str, Any]]:
    """Configured sources whose sessions directory exists, in config order."""
    return [
        {"id": src.id, "label": src.label}
        for src in config.sources.values()
        if src.sessions_dir.exists()
    ]


def compute_statistics(source_id: str, config: AppConfig) -> Statistics:
    """Read, normalize and aggregate every session log of one source.

    Raises UnknownSourceError before touching the filesystem when the id
    is not configured. MalformedLogError and OSError from reading the
    logs propagate unchanged.
    """
    registry = create_normalizer_registry(config)
    if source_id not in config.sources:
        raise UnknownSourceError(source_id, list(config.sources))
    normalizer = get_normalizer(source_id, registry)
    source = config.sources[source_id]

    t0 = time.monotonic()
    log_files = read_session_logs(source.sessions_dir)
    sessions = normalizer.normalize_files(log_files)
    stats = build_statistics(
        sessions,
        source=source.id,
        source_label=source.label,
        cost_estimated=normalizer.cost_estimated,
    )
    logger.info(
        "Computed %s stats: %d sessions across %d projects in %.2fs",
        source.id, stats.summary.total_sessions, stats.summary.projects,
        time.monotonic() - t0,
    )
    return stats
