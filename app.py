"""
FastAPI service for the agent usage dashboard.

Stats are recomputed from the raw session logs on every request; there
is no cache to invalidate.

Deployment: uvicorn app:app --host 127.0.0.1 --port 3000
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from config import load_config
from log_reader import MalformedLogError
from normalizers import UnknownSourceError
from stats_service import compute_statistics, list_available_sources

logger = logging.getLogger("agent-stats")

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------
CONFIG = load_config()

app = FastAPI(title="Agent Usage Dashboard")


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {"status": "ok"}


@app.get("/api/sources")
def api_sources():
    """Sources with a sessions directory present on this machine."""
    return list_available_sources(CONFIG)


@app.get("/api/stats/{source}")
def api_stats(source: str):
    """Aggregate statistics for one source, rebuilt from its logs."""
    try:
        stats = compute_statistics(source, CONFIG)
    except UnknownSourceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (MalformedLogError, OSError) as e:
        logger.exception("Failed to compute %s stats", source)
        raise HTTPException(status_code=500, detail=str(e))
    return stats.to_dict()
