"""Extract flagged top-level library functions that are kept only on demand."""

from __future__ import annotations

import re

from frostbite.extractor.base import BaseExtractor

_FUNCTION_RE = re.compile(r"^(?:export\s+)?function\s+([A-Za-z_$][\w$]*)")


class ProblematicFunctionExtractor(BaseExtractor):
    """Capture the full declarations of the configured problematic functions."""

    def _match_header(self, stripped: str) -> str | None:
        m = _FUNCTION_RE.match(stripped)
        if m and m.group(1) in self.config.problematic_functions:
            return m.group(1)
        return None
