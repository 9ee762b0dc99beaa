"""Remove // and /* */ comments while leaving string literals untouched."""

from __future__ import annotations

_QUOTES = ("'", '"', "`")


def strip_comments(source: str) -> str:
    """Drop comment text from source.

    Strings opened by ', " or ` are copied through verbatim, escapes
    included, so comment markers inside them survive. Newlines end a line
    comment; a block comment swallows everything up to its closing ``*/``,
    newlines included. Unterminated strings and block comments run to the
    end of input without error.
    """
    out: list[str] = []
    quote = ""
    in_line_comment = False
    in_block_comment = False
    length = len(source)

    pos = 0
    while pos < length:
        ch = source[pos]
        next_ch = source[pos + 1] if pos + 1 < length else ""

        if in_line_comment:
            if ch == "\n":
                in_line_comment = False
                out.append(ch)
        elif in_block_comment:
            if ch == "*" and next_ch == "/":
                in_block_comment = False
                pos += 1
        elif quote:
            out.append(ch)
            if ch == "\\" and next_ch:
                out.append(next_ch)
                pos += 1
            elif ch == quote:
                quote = ""
        else:
            if ch == "/" and next_ch == "/":
                in_line_comment = True
                pos += 1
            elif ch == "/" and next_ch == "*":
                in_block_comment = True
                pos += 1
            else:
                if ch in _QUOTES:
                    quote = ch
                out.append(ch)

        pos += 1

    return "".join(out)
