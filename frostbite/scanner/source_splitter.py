"""Split a script into its library namespace block and everything else."""

from __future__ import annotations

import logging

from frostbite.models import CompileConfig, SplitSource
from frostbite.scanner.brace_scanner import BraceScanner

logger = logging.getLogger(__name__)


def split_source(source: str, config: CompileConfig | None = None) -> SplitSource:
    """Separate the first library block from the user section.

    The block starts at the first line containing the namespace marker and
    runs until its braces balance. All other lines, before and after, go to
    the user section in their original order. A script without the marker
    is all user section.
    """
    config = config or CompileConfig()
    library: list[str] = []
    user: list[str] = []

    scanner = BraceScanner()
    inside = False
    done = False

    for line in source.splitlines():
        if not inside and not done and config.namespace_marker in line:
            inside = True

        if inside:
            library.append(line + "\n")
            scanner.advance(line)
            if scanner.closed:
                inside = False
                done = True
        else:
            user.append(line + "\n")

    if not library:
        logger.debug("No %r block found, treating whole script as user code", config.namespace_marker)
    else:
        logger.debug("Split %d library line(s), %d user line(s)", len(library), len(user))

    return SplitSource(library="".join(library), user="".join(user))
