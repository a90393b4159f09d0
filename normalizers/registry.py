"""Session normalizer registry and factory."""

from __future__ import annotations

from config import AppConfig
from .base import SessionNormalizer
from .claude import ClaudeNormalizer
from .pi import PiNormalizer


class UnknownSourceError(ValueError):
    """Requested source id is not one we know how to read."""

    def __init__(self, source_id: str, known: list[str]):
        self.source_id = source_id
        self.known = known
        choices = ", ".join(repr(k) for k in known)
        super().__init__(f"Unknown source {source_id!r}; must be one of {choices}")


def create_normalizer_registry(config: AppConfig) -> dict[str, SessionNormalizer]:
    """
    Create and return the normalizer registry.

    Maps source ids to their normalizer instances.
    """
    return {
        "pi": PiNormalizer(),
        "claude": ClaudeNormalizer(config.token_rates),
    }


def get_normalizer(source_id: str, registry: dict[str, SessionNormalizer]) -> SessionNormalizer:
    """Get the normalizer for a source id, raising UnknownSourceError if none."""
    try:
        return registry[source_id]
    except KeyError:
        raise UnknownSourceError(source_id, list(registry)) from None
