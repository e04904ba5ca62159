"""
# Cirno Parsing

Each non-blank source line declares one object:

    :<kind> <attr> <args...> <attr> <args...> ...

List-valued attributes (`value and ...`, `value or ...`) are terminated by a bare `.`.
"""

# Std-Lib Imports
import os
from pathlib import Path
from typing import List, Optional, Union

# Local Imports
from .data import *
from .error import (
    CirnoError,
    CouldNotOpenProject,
    InvalidAttribute,
    InvalidAttributeForObject,
    InvalidColorAttribute,
    InvalidFiletype,
    InvalidNumber,
    InvalidObjectType,
    InvalidValueAttribute,
    MissingAttribute,
    NamelessInvalidValueForAttribute,
    NumberOutOfRange,
    OutOfTokens,
    OutOfTokensExpectedNumber,
    UnexpectedToken,
    UnexpectedTokenExpectedNumber,
)
from .lex import Token, Tokens, lex


# Project files. Chip templates (`.cic`) are only loaded through the standard library.
PROJECT_SUFFIX = ".cip"
TEMPLATE_SUFFIX = ".cic"


def parse(src: Union[str, os.PathLike]) -> List[Object]:
    """
    Primary parsing entry point.
    String arguments are parsed as source text, anything else as a path to a project file.
    """
    if isinstance(src, str):
        return parse_str(src)
    return parse_files(src)


def parse_files(path: os.PathLike) -> List[Object]:
    """Parse the project file at `path`."""
    p = Path(path)
    if p.suffix != PROJECT_SUFFIX:
        raise InvalidFiletype(p.suffix or p.name)
    try:
        src = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CouldNotOpenProject(p) from e
    return parse_str(src, path=p)


def parse_str(src: str, *, path: Optional[Path] = None) -> List[Object]:
    """Parse source text into its ordered object list.
    Errors are annotated with the (1-based) line on which they occurred."""
    ast = []
    for num, line in enumerate(src.split("\n"), start=1):
        try:
            obj = LineParser(lex(line)).parse()
        except CirnoError as e:
            raise e.at_line(num)
        if obj is None:
            continue  # Blank line
        obj.source_info = SourceInfo(line=num, path=path)
        ast.append(obj)
    return ast


def to_number(text: str) -> int:
    """Convert the text of a `Number` token into a coordinate-sized integer.
    The token pattern permits empty text; conversion is where that is rejected."""
    try:
        num = int(text)
    except ValueError:
        raise InvalidNumber(text)
    if num < 0 or num > MAX_COORD:
        raise NumberOutOfRange(num)
    return num


class LineParser:
    """Single-Line Parser
    Consumes the tokens of one line into one (or no) object."""

    def __init__(self, tokens: List[Token]):
        self.tokens = iter(tokens)
        self.cur: Optional[Token] = None
        self.nxt: Optional[Token] = next(self.tokens, None)

    def advance(self) -> Optional[Token]:
        self.cur = self.nxt
        self.nxt = next(self.tokens, None)
        return self.cur

    def peek(self) -> Optional[Token]:
        """Peek at the next Token"""
        return self.nxt

    def expect(self, tp: str, what: str) -> str:
        """Assertion that our next token is of type `tp`, returning its text.
        `what` describes the expected token in error messages."""
        if self.nxt is None:
            raise OutOfTokens(what)
        if self.nxt.tp != tp:
            raise UnexpectedToken(self.nxt.val, what)
        return self.advance().val

    def expect_number(self) -> int:
        """Assertion that our next token is a `Number`, returning its value."""
        if self.nxt is None:
            raise OutOfTokensExpectedNumber()
        if self.nxt.tp != Tokens.NUMBER:
            raise UnexpectedTokenExpectedNumber(self.nxt.val)
        return to_number(self.advance().val)

    def expect_vector(self) -> Vector2:
        x = self.expect_number()
        y = self.expect_number()
        return Vector2(x, y)

    def expect_label(self) -> str:
        """Labels are written with a leading tick, which is not part of the label."""
        return self.expect(Tokens.IDENTIFIER, "label")[1:]

    def parse(self) -> Optional[Object]:
        """Parse the line. Returns `None` for blank lines."""
        if self.nxt is None:
            return None

        self.expect(Tokens.SEPARATOR, "':'")
        name = self.expect(Tokens.KEYWORD, "object type")
        try:
            kind = ObjectKind(name)
        except ValueError:
            raise InvalidObjectType(name)
        obj = new_object(kind)

        # Consume and apply attributes until the line runs out
        while self.nxt is not None:
            attr = self.parse_attribute()
            apply_attribute(obj, attr)

        verify(obj)
        return obj

    def parse_attribute(self) -> Attribute:
        """Parse an attribute name and its arguments"""
        name = self.expect(Tokens.KEYWORD, "attribute")
        try:
            kind = AttributeKind(name)
        except ValueError:
            raise InvalidAttribute(name)

        if kind in (
            AttributeKind.BOUNDS,
            AttributeKind.POSITION,
            AttributeKind.FROM,
            AttributeKind.TO,
        ):
            return Attribute(kind, self.expect_vector())
        if kind in (AttributeKind.Y, AttributeKind.NUM):
            return Attribute(kind, self.expect_number())
        if kind == AttributeKind.TYPE:
            return Attribute(kind, self.expect(Tokens.KEYWORD, "type"))
        if kind == AttributeKind.COLOR:
            color = self.expect(Tokens.KEYWORD, "color")
            try:
                return Attribute(kind, Color(color))
            except ValueError:
                raise InvalidColorAttribute(color)
        if kind == AttributeKind.LABEL:
            return Attribute(kind, self.expect_label())
        if kind == AttributeKind.VALUE:
            return Attribute(kind, self.parse_value())
        raise TypeError(f"Unhandled attribute {kind}")

    def parse_value(self) -> Value:
        """value (gnd | vcc | and 'l1 'l2 ... . | or 'l1 'l2 ... .)"""
        name = self.expect(Tokens.KEYWORD, "value")
        if name == "gnd":
            return Value(ValueKind.GND)
        if name == "vcc":
            return Value(ValueKind.VCC)
        if name in ("and", "or"):
            return Value(ValueKind(name), self.parse_label_list())
        raise InvalidValueAttribute(name)

    def parse_label_list(self) -> List[str]:
        """Parse labels up to and including a terminating `Ender`"""
        labels = []
        while True:
            if self.nxt is None:
                raise OutOfTokens("'.'")
            if self.nxt.tp == Tokens.ENDER:
                self.advance()
                return labels
            labels.append(self.expect_label())


def apply_attribute(obj: Object, attr: Attribute) -> None:
    """Apply `attr` to `obj`, rejecting attributes not meaningful for its kind."""
    kind = attr.kind

    if isinstance(obj, Meta):
        if kind == AttributeKind.BOUNDS:
            obj.bounds = attr.val
            return
    elif isinstance(obj, Chip):
        if kind == AttributeKind.TYPE:
            obj.type = attr.val
            return
        if kind == AttributeKind.POSITION:
            obj.region.position = attr.val
            return
    elif isinstance(obj, Net):
        if kind == AttributeKind.TYPE:
            obj.type = attr.val
            return
        if kind == AttributeKind.Y:
            obj.region.position = Vector2(0, attr.val)
            return
    elif isinstance(obj, Pin):
        if kind == AttributeKind.LABEL:
            obj.label = attr.val
            return
        if kind == AttributeKind.VALUE:
            obj.value = attr.val
            return
        if kind == AttributeKind.POSITION:
            obj.region.position = attr.val
            return
        if kind == AttributeKind.NUM:
            obj.num = attr.val
            return
    elif isinstance(obj, Wire):
        if kind == AttributeKind.COLOR:
            obj.color = attr.val
            return
        if kind == AttributeKind.FROM:
            obj.from_ = attr.val
            return
        if kind == AttributeKind.TO:
            obj.to = attr.val
            return
    else:
        raise TypeError(f"Invalid object {obj}")

    raise InvalidAttributeForObject(kind.value, object_kind(obj).value)


def verify(obj: Object) -> None:
    """Lightweight, per-object structural check, run as each object is parsed.
    Bounds and overlap are left to the validator, once the whole project is known."""
    if isinstance(obj, Meta):
        return
    if isinstance(obj, Chip):
        if not obj.type:
            raise MissingAttribute("type")
        return
    if isinstance(obj, Net):
        if not obj.type:
            raise MissingAttribute("type")
        return
    if isinstance(obj, Pin):
        if obj.value.is_logic and not obj.value.labels:
            raise NamelessInvalidValueForAttribute("value")
        return
    if isinstance(obj, Wire):
        if obj.color is None:
            raise MissingAttribute("color")
        return
    raise TypeError(f"Invalid object {obj}")
