"""
# Lexer Unit Tests
"""

import pytest

from cirno import Token, Tokens, Lexer, lex, UnrecognizedToken


def test_lex_object_declaration():
    """Test lexing a chip declaration, including a slash-segmented type keyword"""
    toks = lex(":chip type gates/and2 pos 1 2")
    assert toks == [
        Token(Tokens.SEPARATOR, ":"),
        Token(Tokens.KEYWORD, "chip"),
        Token(Tokens.KEYWORD, "type"),
        Token(Tokens.KEYWORD, "gates/and2"),
        Token(Tokens.KEYWORD, "pos"),
        Token(Tokens.NUMBER, "1"),
        Token(Tokens.NUMBER, "2"),
    ]


def test_lex_label_list():
    toks = lex("value and 'a 'b2 .")
    assert [t.tp for t in toks] == [
        Tokens.KEYWORD,
        Tokens.KEYWORD,
        Tokens.IDENTIFIER,
        Tokens.IDENTIFIER,
        Tokens.ENDER,
    ]
    assert toks[2].val == "'a"
    assert toks[3].val == "'b2"


def test_lex_flattened_label():
    """Labels may contain underscores, so flattened chip pins can be referenced"""
    toks = lex("value and 'y_and2_1 'a_or2_12 .")
    assert toks[2] == Token(Tokens.IDENTIFIER, "'y_and2_1")
    assert toks[3] == Token(Tokens.IDENTIFIER, "'a_or2_12")
    assert toks[4] == Token(Tokens.ENDER, ".")


def test_lex_whitespace():
    """Whitespace is skipped, and need not separate tokens"""
    assert lex("") == []
    assert lex(" \t ") == []
    assert lex("12abc") == [Token(Tokens.NUMBER, "12"), Token(Tokens.KEYWORD, "abc")]
    assert [t.tp for t in lex("  :meta\tbounds 1 1  ")] == [
        Tokens.SEPARATOR,
        Tokens.KEYWORD,
        Tokens.KEYWORD,
        Tokens.NUMBER,
        Tokens.NUMBER,
    ]


def test_lex_unrecognized():
    with pytest.raises(UnrecognizedToken) as e:
        lex(":pin label 'Ab")
    assert e.value.text == "'Ab"

    with pytest.raises(UnrecognizedToken):
        lex(":meta bounds 1 1 # comment")

    with pytest.raises(UnrecognizedToken):
        lex("Chip")


def test_lexer_is_lazy():
    """Tokens before an unrecognized sequence are produced before it fails"""
    toks = iter(Lexer(":meta @"))
    assert next(toks) == Token(Tokens.SEPARATOR, ":")
    assert next(toks) == Token(Tokens.KEYWORD, "meta")
    with pytest.raises(UnrecognizedToken):
        next(toks)
