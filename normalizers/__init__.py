"""Source-specific normalizers turning raw session logs into Session records."""

from .base import MessageCounts, Session, SessionNormalizer, TokenUsage
from .pi import PiNormalizer
from .claude import COMMAND_MARKERS, ClaudeNormalizer, estimate_cost
from .registry import UnknownSourceError, create_normalizer_registry, get_normalizer

__all__ = [
    'MessageCounts',
    'Session',
    'SessionNormalizer',
    'TokenUsage',
    'PiNormalizer',
    'ClaudeNormalizer',
    'COMMAND_MARKERS',
    'estimate_cost',
    'UnknownSourceError',
    'create_normalizer_registry',
    'get_normalizer',
]
