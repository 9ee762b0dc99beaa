"""frostbite: shrink Office Scripts by dropping unused library methods."""

from __future__ import annotations

__version__ = "0.3.0"

from frostbite.pipeline import compile_text, run_compile

__all__ = ["compile_text", "run_compile", "__version__"]
