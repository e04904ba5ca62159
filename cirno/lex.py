"""
# Cirno Lexing

Source text is tokenized one line at a time; no construct spans lines.
"""

# Std-Lib Imports
import re
from typing import Iterator, List

# PyPi Imports
from pydantic.dataclasses import dataclass

# Local Imports
from .error import UnrecognizedToken


# Master mapping of tokens <=> patterns.
# Order is priority: the first alternative to match at a position wins.
_patterns = dict(
    WHITE=r"\s+",
    IDENTIFIER=r"'[a-z0-9_]+",  # Labels, e.g. `'a1` or flattened chip pins like `'y_and2_1`
    KEYWORD=r"[a-z][a-z0-9/]*",  # Object kinds, attribute names, and types e.g. `gates/and2`
    NUMBER=r"[0-9]+",
    ENDER=r"\.",  # Terminates a list
    SEPARATOR=r"\:",  # Opens an object declaration
    ERROR=r"\S+",
)
# Given each token its name as a key in the overall regex
tokens = {key: rf"(?P<{key}>{val})" for key, val in _patterns.items()}
# Build our overall regex pattern, a union of all
pat = re.compile("|".join(tokens.values()))
# Create an enum-ish class of these token-types
Tokens = type("Tokens", (object,), {k: k for k in tokens.keys()})


@dataclass
class Token:
    """Lexer Token
    Includes type-annotation (as a string), and the token's text value."""

    tp: str  # Type Annotation. A value from `Tokens`.
    val: str  # Text Content Value


class Lexer:
    """# Cirno Line Lexer
    Iterates over the non-whitespace tokens of a single line."""

    def __init__(self, line: str):
        self.line = line
        self.pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self.lex()

    def lex(self) -> Iterator[Token]:
        """Create an iterator over pattern-matches"""
        while self.pos < len(self.line):
            m = pat.match(self.line, self.pos)
            self.pos = m.end()
            if m.lastgroup == Tokens.WHITE:
                continue
            if m.lastgroup == Tokens.ERROR:
                raise UnrecognizedToken(m.group())
            yield Token(m.lastgroup, m.group())


def lex(line: str) -> List[Token]:
    """Tokenize `line` in its entirety.
    Raises `UnrecognizedToken` on the first unmatched character sequence."""
    return list(Lexer(line))
