"""Heuristic method-chain parser.

Given a block of code and a root identifier (``fr`` for the user section,
``this`` for a method body), work out which local names hold table-like
values and which method or property names are invoked on them.

Two passes over the text:

1. Assignment tracking. A ``let``/``const`` binding whose right-hand side
   mentions a tracked name makes its left-hand side names tracked too,
   unless the right-hand side goes through the escape-hatch method, whose
   result is not a table.
2. Call extraction. Each ``;``-delimited statement is cut into chains
   (a new chain starts on a line outside any open parenthesis that does
   not begin with ``.``). A chain is anchored on the longest tracked name
   used as a receiver (``name.`` or ``name[``), and every dotted segment
   after that receiver contributes the name before its ``(``.
   A reserved data field ends the walk, because whatever follows operates
   on plain data.

A final scan catches ``for (... of name.method(...))`` loops, then names
that cannot be method names are discarded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from frostbite.models import CompileConfig

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*")


@dataclass(frozen=True)
class Anchor:
    name: str
    receiver: int  # first occurrence followed by "." or "["


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def is_token_match(code: str, position: int, name: str) -> bool:
    """True if code[position:] starts a whole-token occurrence of name."""
    end = position + len(name)
    left_ok = position == 0 or not _is_word_char(code[position - 1])
    right_ok = end >= len(code) or not _is_word_char(code[end])
    return left_ok and right_ok


def _token_positions(code: str, name: str) -> list[int]:
    positions: list[int] = []
    start = code.find(name)
    while start != -1:
        if is_token_match(code, start, name):
            positions.append(start)
        start = code.find(name, start + len(name))
    return positions


def _is_receiver(code: str, position: int, name: str) -> bool:
    after = code[position + len(name):].lstrip()
    return after.startswith(".") or after.startswith("[")


def split_chains(statement: str) -> list[str]:
    """Split a statement into chains that each start on their own line.

    A line continues the previous chain while parentheses or brackets are
    still open, or when it starts with ``.``. Statements without
    semicolons thus still yield one chain per source line.
    """
    chains: list[list[str]] = []
    depth = 0
    for line in statement.split("\n"):
        stripped = line.strip()
        if not chains or (depth <= 0 and stripped and not stripped.startswith(".")):
            chains.append([])
        chains[-1].append(line)
        depth = max(0, depth + stripped.count("(") + stripped.count("[")
                    - stripped.count(")") - stripped.count("]"))
    return ["\n".join(lines).strip() for lines in chains if "".join(lines).strip()]


def rank_anchor(statement: str, tracked: set[str]) -> Anchor | None:
    """Pick the tracked name that heads the method chain in statement.

    Candidates must occur as a whole token followed by ``.`` or ``[``.
    The longest candidate wins, so ``df_filtered`` beats ``df``; equal
    lengths fall back to the earliest receiver position.
    """
    best: tuple[int, int, str] | None = None
    for name in tracked:
        if not name:
            continue
        receivers = [
            p for p in _token_positions(statement, name) if _is_receiver(statement, p, name)
        ]
        if not receivers:
            continue
        key = (-len(name), receivers[0], name)
        if best is None or key < best:
            best = key
    if best is None:
        return None
    return Anchor(name=best[2], receiver=best[1])


class ChainedCallParser:
    """One-shot parser; a fresh instance owns its tracking and call sets."""

    def __init__(self, config: CompileConfig | None = None):
        self.config = config or CompileConfig()
        self.tracking: set[str] = {self.config.constructor_phrase}
        self.calls: set[str] = set()
        self._escape_hatch_re = re.compile(
            rf"\.\s*{re.escape(self.config.escape_hatch_method)}\s*(?:<[^()]*>)?\s*\("
        )
        self._binding_re = re.compile(
            rf"^(?:{'|'.join(re.escape(k) for k in self.config.binding_keywords)})\s+(.*)$",
            re.DOTALL,
        )

    def parse(self, code: str, root: str) -> tuple[set[str], set[str]]:
        """Return ``(tracking, calls)`` for code analyzed from root."""
        self.tracking.add(root)
        self._track_assignments(code)
        self._collect_chain_calls(code)
        self._collect_iterator_calls(code)
        self._discard_artifacts()
        return self.tracking, self.calls

    def get_methods(self) -> list[str]:
        return sorted(self.calls)

    # ── Pass 1: assignments ──────────────────────────────────

    def _track_assignments(self, code: str) -> None:
        for line in code.splitlines():
            for piece in line.split(";"):
                names = self._bound_names(piece)
                if names and not self._escape_hatch_re.search(piece):
                    self.tracking.update(names)

    def _bound_names(self, statement: str) -> list[str]:
        """Names bound by statement if its right-hand side mentions a tracked name."""
        m = self._binding_re.match(statement.strip())
        if m is None or "=" not in m.group(1):
            return []
        lhs, rhs = m.group(1).split("=", 1)
        if not any(name in rhs for name in self.tracking):
            return []
        return extract_lhs_variables(lhs)

    # ── Pass 2: chains ───────────────────────────────────────

    def _collect_chain_calls(self, code: str) -> None:
        for statement in code.split(";"):
            statement = statement.strip()
            if not statement:
                continue
            for chain in split_chains(statement):
                anchor = rank_anchor(chain, self.tracking)
                if anchor is None:
                    continue
                self.calls.update(self._walk_chain(chain[anchor.receiver + len(anchor.name):]))

    def _walk_chain(self, after: str) -> list[str]:
        found: list[str] = []
        paren_depth = 0

        for segment in after.split("."):
            trimmed = segment.strip()
            if not trimmed:
                continue

            base = trimmed.split("(", 1)[0].rstrip(";").strip()
            if base:
                m = _IDENTIFIER_RE.match(base)
                if m is None:
                    continue
                if m.group(0) in self.config.reserved_fields:
                    break
                found.append(m.group(0))
            else:
                paren_depth += trimmed.count("(") - trimmed.count(")")
                if paren_depth <= 0 and trimmed.endswith(";"):
                    break

        return found

    def _collect_iterator_calls(self, code: str) -> None:
        for name in sorted(self.tracking):
            pattern = re.compile(
                rf"\bof\s+{re.escape(name)}\s*\.\s*([A-Za-z_$][\w$]*)"
            )
            for m in pattern.finditer(code):
                method = m.group(1)
                if method not in self.config.reserved_fields:
                    self.calls.add(method)

    def _discard_artifacts(self) -> None:
        self.calls = {
            call for call in self.calls
            if not call.strip().startswith("=") and _IDENTIFIER_RE.fullmatch(call.strip())
        }


def extract_lhs_variables(lhs: str) -> list[str]:
    """Names declared by a binding's left-hand side (keyword already removed).

    Handles a single name, optionally type-annotated, and array
    destructuring such as ``[a, b]``.
    """
    lhs = lhs.strip()
    if lhs.startswith("["):
        inner = lhs[1:lhs.find("]")] if "]" in lhs else lhs[1:]
        names = []
        for part in inner.split(","):
            m = _IDENTIFIER_RE.match(part.strip().lstrip("."))
            if m:
                names.append(m.group(0))
        return names

    m = _IDENTIFIER_RE.match(lhs)
    return [m.group(0)] if m else []


def parse_calls(code: str, root: str, config: CompileConfig | None = None) -> tuple[set[str], set[str]]:
    """Run a fresh parser over code and return ``(tracking, calls)``."""
    return ChainedCallParser(config).parse(code, root)
