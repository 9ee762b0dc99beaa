"""Brace scanning and source splitting."""

from __future__ import annotations

from frostbite.scanner.brace_scanner import BraceScanner
from frostbite.scanner.source_splitter import split_source

__all__ = ["BraceScanner", "split_source"]
