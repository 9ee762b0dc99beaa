"""Abstract base extractor with shared brace-depth block capture."""

from __future__ import annotations

import abc
import logging

from frostbite.models import CompileConfig
from frostbite.scanner.brace_scanner import BraceScanner

logger = logging.getLogger(__name__)


class BaseExtractor(abc.ABC):
    """Base class for extractors that pull named blocks out of a text region."""

    def __init__(self, config: CompileConfig | None = None):
        self.config = config or CompileConfig()

    @abc.abstractmethod
    def _match_header(self, stripped: str) -> str | None:
        """Return the block name if this (stripped) line opens a block."""

    def extract(self, region: str) -> dict[str, str]:
        """Extract ``{name: body}`` for every block in region.

        Bodies keep their original lines, each newline-terminated. A name
        seen twice keeps both bodies, in source order.
        """
        blocks: dict[str, str] = {}
        for name, body in self._capture_blocks(region):
            if name in blocks:
                logger.warning("Duplicate definition of %r, keeping both bodies", name)
                blocks[name] += body
            else:
                blocks[name] = body
        return blocks

    def _capture_blocks(self, region: str) -> list[tuple[str, str]]:
        """Capture each block from its header line until its braces balance."""
        captured: list[tuple[str, str]] = []
        scanner = BraceScanner()
        name: str | None = None
        current: list[str] = []

        for line in region.splitlines():
            if name is None:
                name = self._match_header(line.strip())
                if name is None:
                    continue
                scanner.reset()
                current = []

            current.append(line + "\n")
            scanner.advance(line)

            if scanner.closed:
                captured.append((name, "".join(current)))
                name = None

        if name is not None:
            logger.warning("Block %r is never closed, dropping it", name)

        return captured
