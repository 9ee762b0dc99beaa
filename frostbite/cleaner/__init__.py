"""Cleaner orchestrator."""

from __future__ import annotations

from frostbite.cleaner.comment_stripper import strip_comments
from frostbite.cleaner.whitespace import normalize_whitespace


def preprocess(code: str) -> str:
    """Strip comments, then normalize whitespace."""
    return normalize_whitespace(strip_comments(code))


__all__ = ["preprocess", "strip_comments", "normalize_whitespace"]
