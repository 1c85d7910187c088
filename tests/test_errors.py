"""Test strict checking and IllegalTokenError formatting."""

import pytest

from ferrolex.errors import IllegalTokenError, check_tokens
from ferrolex.lexer import tokenize


class TestCheckTokens:
    def test_clean_stream_passes(self):
        check_tokens(tokenize("let x = 1;"))

    def test_first_illegal_reported(self):
        with pytest.raises(IllegalTokenError) as exc_info:
            check_tokens(tokenize("let @ x # y"))
        err = exc_info.value
        assert err.index == 1
        assert err.message == "unrecognized input"

    def test_dot_run_reported(self):
        with pytest.raises(IllegalTokenError) as exc_info:
            check_tokens(tokenize("a .... b"))
        assert exc_info.value.index == 1


class TestErrorFormatting:
    def _error(self, source: str, filename: str = "<input>") -> IllegalTokenError:
        with pytest.raises(IllegalTokenError) as exc_info:
            check_tokens(tokenize(source), filename)
        return exc_info.value

    def test_starts_with_error_prefix(self):
        assert self._error("@").format().startswith("error: unrecognized input")

    def test_location_line(self):
        formatted = self._error("let x = @;", "main.rs").format()
        assert "--> main.rs: token 4" in formatted

    def test_custom_filename_override(self):
        formatted = self._error("@").format("other.rs")
        assert "other.rs" in formatted

    def test_context_and_carets(self):
        lines = self._error("let x = @;").format().splitlines()
        assert lines[3] == "   | LET IDENT 'x' EQUAL ILLEGAL SEMICOLON EOF"
        assert lines[4] == "   |                     ^^^^^^^"

    def test_long_stream_is_elided(self):
        source = "a b c d e f @ g h i j k l"
        lines = self._error(source).format().splitlines()
        context = lines[3]
        assert context.startswith("   | ... IDENT 'c'")
        assert context.endswith("IDENT 'j' ...")
        caret_col = lines[4].index("^")
        assert context[caret_col:].startswith("ILLEGAL")

    def test_str_is_formatted(self):
        err = self._error("@")
        assert str(err) == err.format()
