"""Tests for app.py — FastAPI endpoints."""

import pytest


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_healthz_returns_200(self, client):
        resp = client.get("/healthz")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestSourcesEndpoint:
    """Tests for GET /api/sources."""

    def test_empty_when_no_dirs(self, client):
        resp = client.get("/api/sources")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_lists_present_sources(self, client, pi_root, claude_root):
        resp = client.get("/api/sources")
        assert resp.json() == [
            {"id": "pi", "label": "pi"},
            {"id": "claude", "label": "Claude Code"},
        ]


class TestStatsEndpoint:
    """Tests for GET /api/stats/{source}."""

    def test_claude_payload(self, client, claude_root):
        resp = client.get("/api/stats/claude")
        assert resp.status_code == 200
        data = resp.json()
        assert data["source"] == "claude"
        assert data["sourceLabel"] == "Claude Code"
        assert data["costEstimated"] is True
        assert data["summary"]["totalSessions"] == 1
        assert data["summary"]["totalCost"] == pytest.approx(0.0141)
        assert "openclaw-channel-cqlaw" in data["projectStats"]
        assert len(data["punchcard"]) == 7

    def test_pi_payload(self, client, pi_root):
        data = client.get("/api/stats/pi").json()
        assert data["costEstimated"] is False
        assert data["thinkingUsage"] == {"high": 1}
        assert data["dailyTokens"]["2025-06-01"]["cacheRead"] == 1000

    def test_missing_dir_returns_empty_stats(self, client):
        resp = client.get("/api/stats/pi")
        assert resp.status_code == 200
        data = resp.json()
        assert data["summary"]["totalSessions"] == 0
        assert data["projectStats"] == {}

    def test_unknown_source_400(self, client):
        resp = client.get("/api/stats/codex")
        assert resp.status_code == 400
        assert "codex" in resp.json()["detail"]

    def test_malformed_log_500(self, client, claude_root):
        (claude_root / "-home-pi-TP").mkdir()
        (claude_root / "-home-pi-TP" / "broken.jsonl").write_text("NOT JSON\n")
        resp = client.get("/api/stats/claude")
        assert resp.status_code == 500
        assert "broken.jsonl:1" in resp.json()["detail"]

    def test_invalid_utf8_log_still_counted(self, client, claude_root):
        path = claude_root / "-home-pi-TP" / "latin1.jsonl"
        path.parent.mkdir()
        path.write_bytes(
            b'{"type": "user", "timestamp": "2025-06-03T08:00:00.000Z",'
            b' "message": {"role": "user", "content": "caf\xe9"}}\n'
        )
        resp = client.get("/api/stats/claude")
        assert resp.status_code == 200
        data = resp.json()
        assert data["summary"]["totalSessions"] == 2
        assert data["projectStats"]["TP"]["userMessages"] == 1
