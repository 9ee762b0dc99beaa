"""Reassemble a minimized library namespace from the required methods."""

from __future__ import annotations

import logging

from frostbite.cleaner.whitespace import normalize_whitespace
from frostbite.errors import MethodLookupError
from frostbite.models import CompileConfig, FunctionSet

logger = logging.getLogger(__name__)


def assembly_order(required: set[str], config: CompileConfig | None = None) -> list[str]:
    """Constructor first, then everything else alphabetically."""
    config = config or CompileConfig()
    rest = sorted(name for name in required if name != config.constructor_name)
    if config.constructor_name in required:
        return [config.constructor_name] + rest
    return rest


def resolve_method(name: str, functions: FunctionSet, config: CompileConfig | None = None) -> str:
    """Return the stored body for name, trying its decorated key first."""
    config = config or CompileConfig()
    for key in (config.decorated_methods.get(name), name):
        if key is not None and key in functions.methods:
            return functions.methods[key]
    raise MethodLookupError(name)


def assemble_library(
    functions: FunctionSet,
    required: set[str],
    config: CompileConfig | None = None,
) -> str:
    """Build the minimized namespace text.

    Unrequired problematic functions are cut out of the always-kept header,
    required methods follow in assembly order, and two closing braces end
    the class and the namespace.
    """
    config = config or CompileConfig()
    header = functions.always_take
    for name in sorted(functions.problematic):
        if name not in required:
            logger.debug("Removing unused library function %r", name)
            header = header.replace(functions.problematic[name], "")
    header = normalize_whitespace(header)

    bodies: list[str] = []
    for name in assembly_order(required, config):
        if name in functions.problematic or name in config.root_aliases:
            continue  # top-level function, lives in the header
        bodies.append(resolve_method(name, functions, config).rstrip("\n"))

    parts = [header.rstrip("\n"), *bodies, "}", "}"]
    return "\n".join(parts)


def assemble_script(
    functions: FunctionSet,
    required: set[str],
    user: str,
    config: CompileConfig | None = None,
) -> str:
    """Minimized library followed by the untouched user section."""
    return assemble_library(functions, required, config) + "\n" + user
