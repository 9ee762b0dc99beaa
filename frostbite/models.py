"""Data models for the frostbite compile pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from frostbite.analysis.graph_models import CallGraph


@dataclass
class CompileConfig:
    """Dialect constants for the library being minimized."""
    namespace_marker: str = "namespace fr"
    public_alias: str = "fr"
    self_keyword: str = "this"
    record_type: str = "DataFrame"
    constructor_name: str = "constructor"
    binding_keywords: tuple[str, ...] = ("let", "const")
    reserved_fields: tuple[str, ...] = ("values", "columns", "dtypes", "__headers")
    escape_hatch_method: str = "apply"
    # Methods whose body is looked up under a decorated key at assembly time
    decorated_methods: dict[str, str] = field(default_factory=lambda: {
        "apply": "apply<T>",
    })
    problematic_functions: tuple[str, ...] = ("combine_dfs",)
    # Exported functions with no graph node that pull in one method
    root_aliases: dict[str, str] = field(default_factory=lambda: {
        "combine_dfs": "concat_all",
    })

    @property
    def constructor_phrase(self) -> str:
        return f"new {self.record_type}"


@dataclass
class SplitSource:
    """Result from the splitter stage."""
    library: str
    user: str

    @property
    def has_library(self) -> bool:
        return bool(self.library.strip())


@dataclass
class FunctionSet:
    """Result from the extractor stage."""
    always_take: str = ""
    methods: dict[str, str] = field(default_factory=dict)
    problematic: dict[str, str] = field(default_factory=dict)


@dataclass
class CompileResult:
    """Result from a full compile run."""
    output: str
    split: SplitSource
    functions: FunctionSet = field(default_factory=FunctionSet)
    graph: CallGraph = field(default_factory=CallGraph)
    root_calls: list[str] = field(default_factory=list)
    required: list[str] = field(default_factory=list)
    unknown_roots: list[str] = field(default_factory=list)
    aliased_roots: list[str] = field(default_factory=list)
    input_size: int = 0

    @property
    def output_size(self) -> int:
        return len(self.output)

    @property
    def methods_total(self) -> int:
        return len(self.functions.methods)

    @property
    def methods_kept(self) -> int:
        return sum(1 for name in self.required if name in self.graph.edges)
