"""Compile pipeline: preprocess -> split -> extract -> graph -> search -> assemble."""

from __future__ import annotations

import logging
from typing import Callable

from frostbite.analysis.call_graph import CallGraphBuilder
from frostbite.analysis.reachability import find_required
from frostbite.assembler import assemble_script, assembly_order
from frostbite.cleaner import preprocess
from frostbite.extractor import extract_function_set
from frostbite.models import CompileConfig, CompileResult
from frostbite.parser import parse_calls
from frostbite.scanner import split_source

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]

_STAGES = ("Preprocessing", "Splitting", "Extracting", "Building call graph", "Resolving", "Assembling")


def run_compile(
    source: str,
    config: CompileConfig | None = None,
    progress: ProgressCallback | None = None,
) -> CompileResult:
    """Compile a raw script down to the library methods it actually uses.

    Raises CompileError (a ValueError) when the library block is malformed
    or a required method cannot be found.
    """
    config = config or CompileConfig()
    total = len(_STAGES)

    def step(index: int) -> None:
        if progress:
            progress(_STAGES[index], index, total)

    # Stage 1: Preprocess
    step(0)
    cleaned = preprocess(source)

    # Stage 2: Split
    step(1)
    split = split_source(cleaned, config)
    if not split.has_library:
        if progress:
            progress("Done", total, total)
        return CompileResult(output=split.user, split=split, input_size=len(source))

    # Stage 3: Extract
    step(2)
    functions = extract_function_set(split.library, config)

    # Stage 4: Call graph
    step(3)
    graph = CallGraphBuilder(config).build(functions)

    # Stage 5: Entry calls + BFS
    step(4)
    _, calls = parse_calls(split.user, config.public_alias, config)
    reach = find_required(graph, sorted(calls), config)

    # Stage 6: Assemble
    step(5)
    output = assemble_script(functions, reach.required, split.user, config)

    if progress:
        progress("Done", total, total)

    result = CompileResult(
        output=output,
        split=split,
        functions=functions,
        graph=graph,
        root_calls=reach.roots,
        required=assembly_order(reach.required, config),
        unknown_roots=reach.unknown_roots,
        aliased_roots=reach.aliased_roots,
        input_size=len(source),
    )
    logger.debug(
        "Kept %d of %d method(s), %d -> %d chars",
        result.methods_kept, result.methods_total, result.input_size, result.output_size,
    )
    return result


def compile_text(source: str, config: CompileConfig | None = None) -> str:
    """Return only the compiled script text."""
    return run_compile(source, config).output
