"""Tests for the preprocessing layer."""

from frostbite.cleaner import normalize_whitespace, preprocess, strip_comments


def test_strip_line_comment_keeps_newline():
    assert strip_comments("let a = 1; // one\nlet b = 2;\n") == "let a = 1; \nlet b = 2;\n"


def test_strip_block_comment_spanning_lines():
    code = "let a = 1;\n/* first\n   second */let b = 2;\n"
    assert strip_comments(code) == "let a = 1;\nlet b = 2;\n"


def test_comment_markers_inside_strings_survive():
    code = 'let url = "https://example.com"; // trailing\n'
    assert strip_comments(code) == 'let url = "https://example.com"; \n'

    code = "let s = '/* not a comment */';\n"
    assert strip_comments(code) == code

    code = "let t = `a // b`;\n"
    assert strip_comments(code) == code


def test_escaped_quote_does_not_end_string():
    code = 'let s = "say \\"hi\\" // still string";\n'
    assert strip_comments(code) == code


def test_unterminated_block_comment_runs_to_end():
    assert strip_comments("let a = 1;\n/* never closed\nlet b;\n") == "let a = 1;\n"


def test_normalize_whitespace():
    code = "a   \n\n\n\nb\t\n  \n\nc"
    assert normalize_whitespace(code) == "a\n\nb\n\nc\n"


def test_normalize_whitespace_empty():
    assert normalize_whitespace("") == ""


def test_preprocess_collapses_removed_comment_lines():
    code = "let a = 1;\n// one\n\n// two\nlet b = 2;   \n"
    assert preprocess(code) == "let a = 1;\n\nlet b = 2;\n"


def test_preprocess_is_idempotent():
    code = "x = 1; /* c */\n\n\n  // d\ny = 2;\n"
    once = preprocess(code)
    assert preprocess(once) == once
