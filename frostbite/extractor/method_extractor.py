"""Extract record-class method bodies by brace matching."""

from __future__ import annotations

import logging
import re

from frostbite.extractor.base import BaseExtractor

logger = logging.getLogger(__name__)

# Trailing type parameters, e.g. "apply<T>" or "map<K, V>"
_GENERIC_SUFFIX_RE = re.compile(r"\s*<[^()]*>\s*$")

# Block statements that look like headers when a signature spans several lines
_STATEMENT_KEYWORDS = frozenset({"if", "for", "while", "switch", "catch", "function"})


def normalize_method_name(raw: str) -> str:
    """Reduce a method header prefix to the name used at call sites.

    Drops trailing type parameters and leading modifiers such as
    ``private``, ``static`` or ``async``.
    """
    name = _GENERIC_SUFFIX_RE.sub("", raw.strip())
    parts = name.split()
    return parts[-1] if parts else ""


class MethodExtractor(BaseExtractor):
    """Every line containing ``(`` and ending in ``{`` opens a method."""

    def _match_header(self, stripped: str) -> str | None:
        if "(" not in stripped or not stripped.endswith("{"):
            return None
        name = normalize_method_name(stripped.split("(", 1)[0])
        if name in _STATEMENT_KEYWORDS:
            logger.debug(
                "Method header %r is a %r statement; a multi-line signature above it is skipped",
                stripped, name,
            )
        return name or None
