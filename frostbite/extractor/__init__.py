"""Extractor registry: library segment -> FunctionSet."""

from __future__ import annotations

import logging
import re

from frostbite.errors import MalformedInputError
from frostbite.extractor.base import BaseExtractor
from frostbite.extractor.method_extractor import MethodExtractor, normalize_method_name
from frostbite.extractor.problematic_extractor import ProblematicFunctionExtractor
from frostbite.models import CompileConfig, FunctionSet

logger = logging.getLogger(__name__)


def _constructor_line_start(library: str, config: CompileConfig) -> int:
    """Offset of the start of the line holding the constructor declaration."""
    m = re.search(rf"\b{re.escape(config.constructor_name)}\s*\(", library)
    if m is None:
        raise MalformedInputError(
            f"Library namespace has no {config.constructor_name!r} for class {config.record_type}"
        )
    return library.rfind("\n", 0, m.start()) + 1


def extract_function_set(library: str, config: CompileConfig | None = None) -> FunctionSet:
    """Split the library at the constructor line and extract its blocks.

    Everything before the constructor line is kept whole as ``always_take``;
    problematic functions found there are also indexed by name so assembly
    can cut them out. Method bodies come from the constructor line onward.
    """
    config = config or CompileConfig()
    split_at = _constructor_line_start(library, config)
    before, region = library[:split_at], library[split_at:]

    problematic = ProblematicFunctionExtractor(config).extract(before)
    methods = MethodExtractor(config).extract(region)

    for name in sorted(set(problematic) & set(methods)):
        logger.warning("%r is both a library function and a method, treating it as a method", name)
        del problematic[name]

    logger.debug(
        "Extracted %d method(s) and %d problematic function(s)",
        len(methods), len(problematic),
    )
    return FunctionSet(always_take=before, methods=methods, problematic=problematic)


__all__ = [
    "BaseExtractor",
    "MethodExtractor",
    "ProblematicFunctionExtractor",
    "extract_function_set",
    "normalize_method_name",
]
