"""Call graph builder: one node per library method, edges to the methods it calls."""

from __future__ import annotations

import logging

from frostbite.analysis.graph_models import CallGraph
from frostbite.extractor.method_extractor import normalize_method_name
from frostbite.models import CompileConfig, FunctionSet
from frostbite.parser.chain_parser import ChainedCallParser

logger = logging.getLogger(__name__)


class CallGraphBuilder:
    """Build a pruned call graph from extracted method bodies."""

    def __init__(self, config: CompileConfig | None = None):
        self.config = config or CompileConfig()

    def build(self, functions: FunctionSet) -> CallGraph:
        graph = CallGraph()

        for name, body in functions.methods.items():
            parser = ChainedCallParser(self.config)
            parser.parse(body, self.config.self_keyword)
            node = normalize_method_name(name)
            graph.edges[node] = sorted(set(graph.edges.get(node, [])) | set(parser.get_methods()))

        self._prune(graph)
        return graph

    def _prune(self, graph: CallGraph) -> None:
        """Drop edges whose target is not a method defined in the graph."""
        defined = graph.nodes
        dropped = 0
        for node, targets in graph.edges.items():
            kept = [t for t in targets if t in defined]
            dropped += len(targets) - len(kept)
            graph.edges[node] = kept
        logger.debug("Call graph: %d node(s), pruned %d external edge(s)", len(graph), dropped)


def build_call_graph(functions: FunctionSet, config: CompileConfig | None = None) -> CallGraph:
    return CallGraphBuilder(config).build(functions)
