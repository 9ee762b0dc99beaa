"""Breadth-first search for the methods a set of entry calls depends on."""

from __future__ import annotations

import logging
from collections import deque

from frostbite.analysis.graph_models import CallGraph, ReachabilityResult
from frostbite.models import CompileConfig

logger = logging.getLogger(__name__)


def find_required(
    graph: CallGraph,
    roots: list[str],
    config: CompileConfig | None = None,
) -> ReachabilityResult:
    """Collect every method reachable from roots, plus the constructor.

    Roots with no graph node are skipped, except names listed in
    ``config.root_aliases``: those exported functions are kept themselves
    and pull in the one method they depend on.
    """
    config = config or CompileConfig()
    result = ReachabilityResult(roots=sorted(roots))
    visited: set[str] = set()
    queue: deque[str] = deque()

    for root in result.roots:
        if root in graph:
            if root not in visited:
                visited.add(root)
                queue.append(root)
        elif root in config.root_aliases:
            target = config.root_aliases[root]
            logger.info("Entry function %r kept together with method %r", root, target)
            visited.add(root)
            result.aliased_roots.append(root)
            if target in graph and target not in visited:
                visited.add(target)
                queue.append(target)
        else:
            logger.info("Entry function %r not found in call graph, skipping", root)
            result.unknown_roots.append(root)

    while queue:
        current = queue.popleft()
        for callee in graph.callees(current):
            if callee not in visited:
                visited.add(callee)
                queue.append(callee)

    visited.add(config.constructor_name)
    result.required = visited
    return result
