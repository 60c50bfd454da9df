"""Core processors for snapshot copy preparation."""

from .key_classifier import build_alias_mapping, classify_key, classify_keys

__all__ = [
    "build_alias_mapping",
    "classify_key",
    "classify_keys",
]
