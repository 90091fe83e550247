"""
Tests for the lexer: token kinds, literals, keyword lookup and EOF handling.
"""

import pytest

from verbal.lexing import Lexer, LexerConfig, Token, TokenKind, tokenize, show_tokens


def kinds_and_literals(source):
    return [(t.kind, t.lexeme) for t in tokenize(source)]


class TestNextToken:
    """Walk the lexer over a program that uses every token kind"""

    def test_full_program(self):
        source = """
        manau a = 5;
        manau add = karya(x, y) {
            x + y;
        }

        !-/*5;
        <>

        yadi (5 < 10) {
            firta satya;
        } natra {
            firta jhuth;
        }

        10 == 10;
        10 != 69
        """
        expected = [
            (TokenKind.LET, "manau"),
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.ASSIGN, "="),
            (TokenKind.INT, "5"),
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.LET, "manau"),
            (TokenKind.IDENTIFIER, "add"),
            (TokenKind.ASSIGN, "="),
            (TokenKind.FUNCTION, "karya"),
            (TokenKind.LPAREN, "("),
            (TokenKind.IDENTIFIER, "x"),
            (TokenKind.COMMA, ","),
            (TokenKind.IDENTIFIER, "y"),
            (TokenKind.RPAREN, ")"),
            (TokenKind.LBRACE, "{"),
            (TokenKind.IDENTIFIER, "x"),
            (TokenKind.PLUS, "+"),
            (TokenKind.IDENTIFIER, "y"),
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.RBRACE, "}"),
            (TokenKind.BANG, "!"),
            (TokenKind.MINUS, "-"),
            (TokenKind.SLASH, "/"),
            (TokenKind.ASTERISK, "*"),
            (TokenKind.INT, "5"),
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.LT, "<"),
            (TokenKind.GT, ">"),
            (TokenKind.IF, "yadi"),
            (TokenKind.LPAREN, "("),
            (TokenKind.INT, "5"),
            (TokenKind.LT, "<"),
            (TokenKind.INT, "10"),
            (TokenKind.RPAREN, ")"),
            (TokenKind.LBRACE, "{"),
            (TokenKind.RETURN, "firta"),
            (TokenKind.TRUE, "satya"),
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.RBRACE, "}"),
            (TokenKind.ELSE, "natra"),
            (TokenKind.LBRACE, "{"),
            (TokenKind.RETURN, "firta"),
            (TokenKind.FALSE, "jhuth"),
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.RBRACE, "}"),
            (TokenKind.INT, "10"),
            (TokenKind.EQ, "=="),
            (TokenKind.INT, "10"),
            (TokenKind.SEMICOLON, ";"),
            (TokenKind.INT, "10"),
            (TokenKind.NOT_EQ, "!="),
            (TokenKind.INT, "69"),
            (TokenKind.EOF, ""),
        ]
        assert kinds_and_literals(source) == expected


class TestOperators:

    def test_two_char_operators(self):
        assert kinds_and_literals("== != = !") == [
            (TokenKind.EQ, "=="),
            (TokenKind.NOT_EQ, "!="),
            (TokenKind.ASSIGN, "="),
            (TokenKind.BANG, "!"),
            (TokenKind.EOF, ""),
        ]

    def test_operators_without_spaces(self):
        assert [k for k, _ in kinds_and_literals("a==!b")] == [
            TokenKind.IDENTIFIER, TokenKind.EQ, TokenKind.BANG, TokenKind.IDENTIFIER, TokenKind.EOF,
        ]

    def test_assign_at_end_of_input(self):
        assert kinds_and_literals("=") == [(TokenKind.ASSIGN, "="), (TokenKind.EOF, "")]

    @pytest.mark.parametrize("ch", ["@", "#", "$", "\"", "."])
    def test_illegal_characters(self, ch):
        assert kinds_and_literals(ch) == [(TokenKind.ILLEGAL, ch), (TokenKind.EOF, "")]


class TestIdentifiersAndNumbers:

    def test_integer_is_maximal_run(self):
        assert kinds_and_literals("12345") == [(TokenKind.INT, "12345"), (TokenKind.EOF, "")]

    def test_minus_is_separate_token(self):
        assert kinds_and_literals("-7") == [
            (TokenKind.MINUS, "-"), (TokenKind.INT, "7"), (TokenKind.EOF, ""),
        ]

    def test_underscore_identifier(self):
        assert kinds_and_literals("foo_bar _x") == [
            (TokenKind.IDENTIFIER, "foo_bar"),
            (TokenKind.IDENTIFIER, "_x"),
            (TokenKind.EOF, ""),
        ]

    def test_digits_end_identifier(self):
        assert kinds_and_literals("x1") == [
            (TokenKind.IDENTIFIER, "x"),
            (TokenKind.INT, "1"),
            (TokenKind.EOF, ""),
        ]

    def test_keyword_prefix_is_identifier(self):
        assert kinds_and_literals("manaux") == [(TokenKind.IDENTIFIER, "manaux"), (TokenKind.EOF, "")]

    def test_english_aliases(self):
        assert [k for k, _ in kinds_and_literals("let if else true false return fn")] == [
            TokenKind.LET, TokenKind.IF, TokenKind.ELSE, TokenKind.TRUE,
            TokenKind.FALSE, TokenKind.RETURN, TokenKind.FUNCTION, TokenKind.EOF,
        ]

    def test_custom_keyword_table(self):
        config = LexerConfig({"var": TokenKind.LET})
        lexer = Lexer("var manau", config)
        assert lexer.next_token() == Token(TokenKind.LET, "var")
        assert lexer.next_token() == Token(TokenKind.IDENTIFIER, "manau")


class TestEOF:

    def test_empty_input(self):
        assert kinds_and_literals("") == [(TokenKind.EOF, "")]

    def test_whitespace_only(self):
        assert kinds_and_literals(" \t\r\n ") == [(TokenKind.EOF, "")]

    def test_eof_is_sticky(self):
        lexer = Lexer("x")
        assert lexer.next_token().kind == TokenKind.IDENTIFIER
        for _ in range(3):
            assert lexer.next_token() == Token(TokenKind.EOF, "")

    def test_iteration_stops_before_eof(self):
        assert [t.lexeme for t in Lexer("1 + 2")] == ["1", "+", "2"]

    def test_show_tokens(self):
        assert show_tokens(tokenize("manau x=1;")) == "manau x = 1 ;"
