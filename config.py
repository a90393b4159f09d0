"""Source and pricing configuration for the agent usage stats service.

Built once at startup by load_config() and passed explicitly to the
stats service, normalizers and CLI. An optional YAML file can override
session directories, labels and token rates.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "AGENT_STATS_CONFIG"


class ConfigError(ValueError):
    """Raised when a config file cannot be applied."""


@dataclass(frozen=True)
class TokenRates:
    """USD per million tokens, used when a source does not report cost.

    Defaults approximate Claude Sonnet pricing.
    """
    input: float = 3.0
    output: float = 15.0
    cache_read: float = 0.30
    cache_write: float = 3.75


@dataclass(frozen=True)
class SourceConfig:
    """One agent tool whose session logs we can read."""
    id: str
    label: str
    sessions_dir: Path
    cost_estimated: bool = False


@dataclass(frozen=True)
class AppConfig:
    sources: dict[str, SourceConfig]
    token_rates: TokenRates = field(default_factory=TokenRates)


def default_sources(home: Path | None = None) -> dict[str, SourceConfig]:
    """Return the built-in source table rooted at the user's home."""
    home = home or Path.home()
    return {
        "pi": SourceConfig(
            id="pi",
            label="pi",
            sessions_dir=home / ".pi" / "agent" / "sessions",
        ),
        "claude": SourceConfig(
            id="claude",
            label="Claude Code",
            sessions_dir=home / ".claude" / "projects",
            cost_estimated=True,
        ),
    }


def _apply_source_overrides(
    sources: dict[str, SourceConfig], raw: dict[str, Any]
) -> dict[str, SourceConfig]:
    updated = dict(sources)
    for source_id, overrides in raw.items():
        if source_id not in updated:
            raise ConfigError(f"Unknown source in config: {source_id!r}")
        overrides = overrides or {}
        if not isinstance(overrides, dict):
            raise ConfigError(f"Source {source_id!r} must be a mapping")
        changes: dict[str, Any] = {}
        if overrides.get("sessions_dir"):
            changes["sessions_dir"] = Path(overrides["sessions_dir"]).expanduser()
        if overrides.get("label"):
            changes["label"] = str(overrides["label"])
        updated[source_id] = replace(updated[source_id], **changes)
    return updated


def _apply_rate_overrides(rates: TokenRates, raw: dict[str, Any]) -> TokenRates:
    changes: dict[str, float] = {}
    for name, value in raw.items():
        if name not in TokenRates.__dataclass_fields__:
            raise ConfigError(f"Unknown token rate: {name!r}")
        try:
            changes[name] = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Token rate {name!r} must be a number, got {value!r}") from e
        if changes[name] < 0:
            raise ConfigError(f"Token rate {name!r} must not be negative")
    return replace(rates, **changes)


def load_config(path: Path | None = None, home: Path | None = None) -> AppConfig:
    """Build the app config, applying a YAML override file if one is given.

    Without an explicit path the AGENT_STATS_CONFIG environment variable
    is consulted. Example file::

        sources:
          claude:
            sessions_dir: ~/work/.claude/projects
        token_rates:
          output: 75.0
    """
    sources = default_sources(home)
    rates = TokenRates()

    if path is None and os.getenv(CONFIG_ENV_VAR):
        path = Path(os.environ[CONFIG_ENV_VAR]).expanduser()
    if path is None:
        return AppConfig(sources=sources, token_rates=rates)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    sources = _apply_source_overrides(sources, raw.get("sources") or {})
    rates = _apply_rate_overrides(rates, raw.get("token_rates") or {})
    return AppConfig(sources=sources, token_rates=rates)
