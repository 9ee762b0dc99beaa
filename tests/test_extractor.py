"""Tests for function and method extraction."""

import logging
from pathlib import Path

import pytest

from frostbite.cleaner import preprocess
from frostbite.errors import CompileError, MalformedInputError
from frostbite.extractor import (
    MethodExtractor,
    ProblematicFunctionExtractor,
    extract_function_set,
    normalize_method_name,
)
from frostbite.models import CompileConfig
from frostbite.scanner import split_source

FIXTURES = Path(__file__).parent / "fixtures"

LIBRARY = (
    "namespace fr {\n"
    "    export function combine_dfs(dfs) {\n"
    "        return dfs[0].concat_all(dfs[1]);\n"
    "    }\n"
    "    export function helper() {\n"
    "        return 1;\n"
    "    }\n"
    "    export class DataFrame {\n"
    "        constructor(values) {\n"
    "            this.values = values;\n"
    "        }\n"
    "        head(n) {\n"
    "            if (n > 0) {\n"
    "                return this.copy();\n"
    "            }\n"
    "            return this;\n"
    "        }\n"
    "        apply<T>(fn: (row: any[]) => T): T[] {\n"
    "            return this.values.map(fn);\n"
    "        }\n"
    "    }\n"
    "}\n"
)


@pytest.fixture
def fixture_library():
    return split_source(preprocess((FIXTURES / "sample_script.ts").read_text())).library


class TestNormalizeMethodName:
    def test_plain(self):
        assert normalize_method_name("head") == "head"

    def test_generic_suffix(self):
        assert normalize_method_name("apply<T>") == "apply"
        assert normalize_method_name("map<K, V>") == "map"

    def test_modifiers(self):
        assert normalize_method_name("private static helper") == "helper"
        assert normalize_method_name("  async load  ") == "load"


class TestExtractFunctionSet:
    def test_split_at_constructor_line(self):
        fs = extract_function_set(LIBRARY)
        assert fs.always_take.endswith("    export class DataFrame {\n")
        assert "constructor" not in fs.always_take
        assert "export function helper()" in fs.always_take

    def test_always_take_keeps_problematic_body(self):
        fs = extract_function_set(LIBRARY)
        assert fs.problematic["combine_dfs"] in fs.always_take

    def test_problematic_only_named_functions(self):
        fs = extract_function_set(LIBRARY)
        assert list(fs.problematic) == ["combine_dfs"]
        assert fs.problematic["combine_dfs"] == (
            "    export function combine_dfs(dfs) {\n"
            "        return dfs[0].concat_all(dfs[1]);\n"
            "    }\n"
        )

    def test_methods(self):
        fs = extract_function_set(LIBRARY)
        assert sorted(fs.methods) == ["apply", "constructor", "head"]

    def test_nested_braces_stay_in_body(self):
        fs = extract_function_set(LIBRARY)
        body = fs.methods["head"]
        assert body.startswith("        head(n) {\n")
        assert "if (n > 0) {" in body
        assert body.endswith("            return this;\n        }\n")

    def test_generic_method_keeps_decorated_text(self):
        fs = extract_function_set(LIBRARY)
        assert fs.methods["apply"].startswith("        apply<T>(fn")

    def test_missing_constructor(self):
        with pytest.raises(MalformedInputError):
            extract_function_set("namespace fr {\n  export class DataFrame {\n  }\n}\n")

    def test_missing_constructor_is_value_error(self):
        with pytest.raises(ValueError):
            extract_function_set("namespace fr {\n}\n")
        assert issubclass(MalformedInputError, CompileError)

    def test_collision_prefers_method(self):
        config = CompileConfig(problematic_functions=("combine_dfs", "head"))
        library = LIBRARY.replace(
            "    export function helper() {",
            "    export function head() {",
        )
        fs = extract_function_set(library, config)
        assert "head" in fs.methods
        assert "head" not in fs.problematic

    def test_fixture(self, fixture_library):
        fs = extract_function_set(fixture_library)
        assert sorted(fs.methods) == [
            "apply", "concat_all", "constructor", "copy", "count", "describe",
            "head", "mean", "sum", "tail", "to_csv",
        ]
        assert list(fs.problematic) == ["combine_dfs"]
        assert "export function from_rows" in fs.always_take


class TestExtractors:
    def test_duplicate_method_keeps_both(self):
        region = "a() {\n  one();\n}\na() {\n  two();\n}\n"
        blocks = MethodExtractor().extract(region)
        assert blocks == {"a": "a() {\n  one();\n}\na() {\n  two();\n}\n"}

    def test_unclosed_block_dropped(self):
        blocks = MethodExtractor().extract("a() {\n  one();\n}\nb() {\n  two();\n")
        assert list(blocks) == ["a"]

    def test_single_line_method_not_a_header(self):
        blocks = MethodExtractor().extract("size() { return this.values.length; }\n")
        assert blocks == {}

    def test_header_must_end_with_brace(self):
        blocks = MethodExtractor().extract("values: any[][];\nfoo(a,\n  b) {\n}\n")
        assert blocks == {}

    def test_problematic_extractor_ignores_other_functions(self):
        region = "function other() {\n}\nfunction combine_dfs(a) {\n  return a;\n}\n"
        blocks = ProblematicFunctionExtractor().extract(region)
        assert blocks == {"combine_dfs": "function combine_dfs(a) {\n  return a;\n}\n"}


def test_multiline_signature_logs_statement_header(caplog):
    region = (
        "groupBy(\n"
        "    keys: string[],\n"
        "): DataFrame {\n"
        "    if (keys.length > 0) {\n"
        "        return this;\n"
        "    }\n"
        "}\n"
    )
    with caplog.at_level(logging.DEBUG, logger="frostbite.extractor.method_extractor"):
        blocks = MethodExtractor().extract(region)
    assert list(blocks) == ["if"]
    assert "'if' statement" in caplog.text
