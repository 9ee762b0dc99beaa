"""Chained method-call parsing."""

from __future__ import annotations

from frostbite.parser.chain_parser import (
    Anchor,
    ChainedCallParser,
    extract_lhs_variables,
    parse_calls,
    rank_anchor,
    split_chains,
)

__all__ = [
    "Anchor",
    "ChainedCallParser",
    "extract_lhs_variables",
    "parse_calls",
    "rank_anchor",
    "split_chains",
]
