"""Data models for the method call graph."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CallGraph:
    edges: dict[str, list[str]] = field(default_factory=dict)  # method -> [callees]

    @property
    def nodes(self) -> set[str]:
        return set(self.edges)

    def __contains__(self, name: object) -> bool:
        return name in self.edges

    def __len__(self) -> int:
        return len(self.edges)

    def callees(self, name: str) -> list[str]:
        return self.edges.get(name, [])


@dataclass
class ReachabilityResult:
    roots: list[str] = field(default_factory=list)
    required: set[str] = field(default_factory=set)
    unknown_roots: list[str] = field(default_factory=list)
    aliased_roots: list[str] = field(default_factory=list)
