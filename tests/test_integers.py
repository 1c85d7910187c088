"""Test integer literal lexing."""

from ferrolex.tokens import TokenType

from tests.conftest import assert_types, int_lit


class TestIntegers:
    def test_literal_text_is_exact(self, lex):
        assert lex("12345") == [int_lit("12345")]

    def test_single_digit(self, lex):
        assert lex("0") == [int_lit("0")]

    def test_leading_zeros_kept(self, lex):
        assert lex("007") == [int_lit("007")]

    def test_no_overflow_handling(self, lex):
        big = "9" * 64
        assert lex(big) == [int_lit(big)]

    def test_no_float_support(self, lex):
        tokens = lex("1.5")
        assert_types(tokens, [TokenType.INT, TokenType.PERIOD, TokenType.INT])

    def test_no_radix_prefix(self, lex):
        tokens = lex("0x1F")
        assert tokens[0] == int_lit("0")
        assert tokens[1].type == TokenType.IDENT
        assert tokens[1].text == "x1F"

    def test_range_of_ints(self, lex):
        assert_types(lex("0..10"), [TokenType.INT, TokenType.RANGE, TokenType.INT])
