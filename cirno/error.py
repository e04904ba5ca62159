"""
# Cirno Errors

Every failure of the load pipeline is a `CirnoError`.
Its string form is the one-line diagnostic shown on the editor's status line.
"""

from typing import Any, Optional


class CirnoError(Exception):
    """Cirno Error"""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg
        self.line: Optional[int] = None  # Source line, where known

    def __str__(self) -> str:
        if self.line is None:
            return self.msg
        return f"line {self.line}: {self.msg}"

    def at_line(self, line: int) -> "CirnoError":
        """Attach the source line number, unless one is already attached."""
        if self.line is None:
            self.line = line
        return self

    @classmethod
    def throw(cls, *args, **kwargs):
        """Exception-raising debug wrapper. Breakpoint to catch `CirnoError`s."""
        raise cls(*args, **kwargs)


class LexError(CirnoError):
    """Lexical Errors"""


class ParseError(CirnoError):
    """Syntactic & Attribute Errors"""


class ResolveError(CirnoError):
    """Standard-Library Resolution Errors"""


class ValidationError(CirnoError):
    """Structural & Bounds Errors"""


class LoadError(CirnoError):
    """Project-Opening Errors"""


# Lexical


class UnrecognizedToken(LexError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"unrecognized token: {text}")


# Syntactic


class UnexpectedToken(ParseError):
    def __init__(self, found: str, expected: str):
        self.found = found
        self.expected = expected
        super().__init__(f"unexpected token {found}, expected {expected}")


class UnexpectedTokenExpectedNumber(ParseError):
    def __init__(self, found: str):
        self.found = found
        super().__init__(f"unexpected token {found}, expected number")


class OutOfTokens(ParseError):
    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"out of tokens, expected {expected}")


class OutOfTokensExpectedNumber(ParseError):
    def __init__(self):
        super().__init__("out of tokens, expected number")


class InvalidObjectType(ParseError):
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"invalid object type: {kind}")


class InvalidAttribute(ParseError):
    def __init__(self, attr: str):
        self.attr = attr
        super().__init__(f"invalid attribute: {attr}")


class InvalidAttributeForObject(ParseError):
    def __init__(self, attr: str, kind: str):
        self.attr = attr
        self.kind = kind
        super().__init__(f"could not apply {attr} to {kind}")


class InvalidColorAttribute(ParseError):
    def __init__(self, color: str):
        self.color = color
        super().__init__(f"invalid color: {color}")


class InvalidValueAttribute(ParseError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid value: {value}")


class InvalidNumber(ParseError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid number: '{text}'")


class NumberOutOfRange(ParseError):
    def __init__(self, num: int):
        self.num = num
        super().__init__(f"number out of range: {num}")


# Semantic


class MissingAttribute(ParseError):
    def __init__(self, attr: str):
        self.attr = attr
        super().__init__(f"missing attribute: {attr}")


class NamelessInvalidValueForAttribute(ParseError):
    def __init__(self, attr: str):
        self.attr = attr
        super().__init__(f"invalid value for attribute {attr}")


class InvalidValueForAttribute(ParseError):
    def __init__(self, value: Any, attr: str):
        self.value = value
        self.attr = attr
        super().__init__(f"invalid value {value} for attribute {attr}")


# Resolution


class NotFoundInStdlib(ResolveError):
    def __init__(self, tp: str):
        self.tp = tp
        super().__init__(f"{tp} not found in stdlib")


class InvalidTemplate(ResolveError):
    def __init__(self, tp: str, reason: str):
        self.tp = tp
        self.reason = reason
        super().__init__(f"invalid template {tp}: {reason}")


# Structural


class MissingMetaObject(ValidationError):
    def __init__(self):
        super().__init__("missing meta object")


class MetaObjectError(ValidationError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"expected exactly one meta object, found {count}")


class TerminalTooSmall(ValidationError):
    def __init__(self, needed, available):
        self.needed = needed
        self.available = available
        super().__init__(
            f"terminal too small: need {needed.x}x{needed.y}, have {available.x}x{available.y}"
        )


class OutOfBounds(ValidationError):
    def __init__(self, kind: str, position):
        self.kind = kind
        self.position = position
        super().__init__(f"{kind} out of bounds at ({position.x}, {position.y})")


class OverlappingRegion(ValidationError):
    def __init__(self, first: int, second: int):
        self.first = first
        self.second = second
        super().__init__(f"objects {first} and {second} overlap")


class InvalidWire(ValidationError):
    def __init__(self, position):
        self.position = position
        super().__init__(
            f"wire starts and ends at the same point ({position.x}, {position.y})"
        )


class TooManyWiresOfColor(ValidationError):
    def __init__(self, color: str):
        self.color = color
        super().__init__(f"too many {color} wires")


# Loading


class InvalidFiletype(LoadError):
    def __init__(self, suffix: str):
        self.suffix = suffix
        super().__init__(f"invalid filetype: {suffix}")


class CouldNotOpenProject(LoadError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"could not open project: {path}")


class CouldNotOpenLibrary(LoadError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"could not open library: {path}")
