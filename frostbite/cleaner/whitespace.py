"""Trim trailing whitespace and collapse runs of blank lines."""

from __future__ import annotations


def normalize_whitespace(code: str) -> str:
    """Return code with right-trimmed lines and no consecutive blank lines.

    Every kept line, blank or not, is newline-terminated.
    """
    out: list[str] = []
    last_blank = False

    for line in code.splitlines():
        line = line.rstrip()
        if not line:
            if not last_blank:
                out.append("\n")
                last_blank = True
        else:
            out.append(line + "\n")
            last_blank = False

    return "".join(out)
