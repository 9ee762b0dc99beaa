"""Exceptions raised by the compile pipeline."""

from __future__ import annotations


class CompileError(ValueError):
    """Base class for failures that abort a compile run."""


class MalformedInputError(CompileError):
    """The library block does not have the shape the extractor relies on."""


class MethodLookupError(CompileError, LookupError):
    """A required method has no body in the library."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Couldn't find method {name!r} in the library namespace")
