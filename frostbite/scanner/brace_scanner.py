"""Line-at-a-time brace depth tracking."""

from __future__ import annotations


class BraceScanner:
    """Track aggregate ``{``/``}`` depth across lines.

    Only the counts matter; braces inside strings are counted too. Depth
    never drops below zero.
    """

    def __init__(self) -> None:
        self.depth = 0
        self.opened = False

    def advance(self, line: str) -> int:
        opens = line.count("{")
        if opens:
            self.opened = True
        self.depth = max(0, self.depth + opens - line.count("}"))
        return self.depth

    @property
    def closed(self) -> bool:
        """True once a block has been opened and fully closed again."""
        return self.opened and self.depth == 0

    def reset(self) -> None:
        self.depth = 0
        self.opened = False
