"""
# Parser Unit Tests
"""

from textwrap import dedent

import pytest

from cirno import (
    parse_str,
    apply_attribute,
    Attribute,
    AttributeKind,
    Chip,
    Color,
    Meta,
    Net,
    Pin,
    Region,
    SourceInfo,
    Value,
    ValueKind,
    Vector2,
    Voltage,
    Wire,
    CirnoError,
    ParseError,
    UnexpectedToken,
    UnexpectedTokenExpectedNumber,
    OutOfTokens,
    OutOfTokensExpectedNumber,
    InvalidObjectType,
    InvalidAttribute,
    InvalidAttributeForObject,
    InvalidColorAttribute,
    InvalidValueAttribute,
    InvalidNumber,
    NumberOutOfRange,
    MissingAttribute,
    NamelessInvalidValueForAttribute,
    UnrecognizedToken,
)
from cirno.parse import to_number


def parse_one(src: str):
    objects = parse_str(src)
    assert len(objects) == 1
    return objects[0]


def test_parse_meta():
    assert parse_str(":meta bounds 10 5") == [
        Meta(bounds=Vector2(10, 5), source_info=SourceInfo(line=1))
    ]


def test_parse_chip():
    chip = parse_one(":chip type gates/and2 pos 1 2")
    assert isinstance(chip, Chip)
    assert chip.type == "gates/and2"
    assert chip.region.position == Vector2(1, 2)
    # Width is derived from the template, later
    assert chip.region.size == Vector2(0, 3)


def test_parse_net():
    net = parse_one(":net type gnd y 4")
    assert isinstance(net, Net)
    assert net.type == "gnd"
    assert net.region.position == Vector2(0, 4)
    assert net.region.size.y == 1


def test_parse_pins():
    pin = parse_one(":pin label 'y num 3 pos 2 2 value and 'a 'b .")
    assert isinstance(pin, Pin)
    assert pin.label == "y"
    assert pin.num == 3
    assert pin.value == Value(ValueKind.AND, ["a", "b"])
    assert pin.voltage == Voltage.FLOATING
    assert pin.region == Region(position=Vector2(2, 2), size=Vector2(1, 1))

    pin = parse_one(":pin value or 'a .")
    assert pin.label == ""
    assert pin.value == Value(ValueKind.OR, ["a"])

    assert parse_one(":pin value gnd").value == Value(ValueKind.GND)
    assert parse_one(":pin value vcc").value == Value(ValueKind.VCC)
    assert parse_one(":pin label 'q").value == Value(ValueKind.NONE)


def test_parse_value_list_mid_line():
    """Attributes may follow a terminated label list"""
    pin = parse_one(":pin value or 'a 'b . label 'c pos 1 1")
    assert pin.value.labels == ["a", "b"]
    assert pin.label == "c"
    assert pin.region.position == Vector2(1, 1)


def test_parse_wire():
    wire = parse_one(":wire color cyan from 1 2 to 3 4")
    assert isinstance(wire, Wire)
    assert wire.color == Color.CYAN
    assert wire.from_ == Vector2(1, 2)
    assert wire.to == Vector2(3, 4)
    # Assigned by the label allocator, not parsed
    assert wire.label == ""


def test_parse_order_and_lines():
    src = dedent(
        """\
        :meta bounds 10 5

        :net type vcc y 0
          
        :pin label 'a pos 1 1
        """
    )
    objects = parse_str(src)
    assert [type(o) for o in objects] == [Meta, Net, Pin]
    assert [o.source_info.line for o in objects] == [1, 3, 5]


def test_parse_later_attribute_wins():
    meta = parse_one(":meta bounds 1 1 bounds 2 3")
    assert meta.bounds == Vector2(2, 3)


@pytest.mark.parametrize(
    "src, err",
    [
        ("meta bounds 1 1", UnexpectedToken),
        (":", OutOfTokens),
        (": 12", UnexpectedToken),
        (":foo", InvalidObjectType),
        (":meta size 1 1", InvalidAttribute),
        (":meta 1 1", UnexpectedToken),
        (":meta color red", InvalidAttributeForObject),
        (":net type vcc pos 0 0", InvalidAttributeForObject),
        (":meta bounds 1", OutOfTokensExpectedNumber),
        (":meta bounds a 1", UnexpectedTokenExpectedNumber),
        (":meta bounds 70000 1", NumberOutOfRange),
        (":wire color purple from 1 1 to 2 2", InvalidColorAttribute),
        (":wire color", OutOfTokens),
        (":pin value xor 'a .", InvalidValueAttribute),
        (":pin value and 'a 'b", OutOfTokens),
        (":pin value and a .", UnexpectedToken),
        (":pin value and .", NamelessInvalidValueForAttribute),
        (":pin label abc", UnexpectedToken),
        (":chip pos 1 1", MissingAttribute),
        (":net y 1", MissingAttribute),
        (":wire from 1 1 to 2 2", MissingAttribute),
        (":meta bounds 1 1 :meta bounds 2 2", UnexpectedToken),
        (":pin label 'A", UnrecognizedToken),
    ],
)
def test_parse_errors(src, err):
    with pytest.raises(err):
        parse_str(src)


def test_parse_error_details():
    with pytest.raises(InvalidAttributeForObject) as e:
        parse_str(":meta color red")
    assert e.value.attr == "color"
    assert e.value.kind == "meta"
    assert str(e.value) == "line 1: could not apply color to meta"

    with pytest.raises(MissingAttribute) as e:
        parse_str(":meta bounds 1 1\n\n:chip pos 1 1")
    assert e.value.attr == "type"
    assert e.value.line == 3
    assert isinstance(e.value, ParseError)
    assert isinstance(e.value, CirnoError)


def test_parse_line_numbers_count_newlines_only():
    """Form feeds and other Unicode line breaks are whitespace, not line ends"""
    with pytest.raises(InvalidObjectType) as e:
        parse_str(":meta bounds 4 4\x0c\n:foo")
    assert e.value.line == 2

    objects = parse_str(":meta bounds 4 4\u2028\r\n:pin pos 1 1\n")
    assert [o.source_info.line for o in objects] == [1, 2]


def test_to_number():
    assert to_number("0") == 0
    assert to_number("65535") == 65535
    with pytest.raises(InvalidNumber):
        to_number("")
    with pytest.raises(NumberOutOfRange):
        to_number("65536")


def test_apply_attribute():
    chip = Chip()
    apply_attribute(chip, Attribute(AttributeKind.TYPE, "gates/or2"))
    apply_attribute(chip, Attribute(AttributeKind.POSITION, Vector2(3, 4)))
    assert chip.type == "gates/or2"
    assert chip.region.position == Vector2(3, 4)

    with pytest.raises(InvalidAttributeForObject) as e:
        apply_attribute(Net(), Attribute(AttributeKind.BOUNDS, Vector2(1, 1)))
    assert str(e.value) == "could not apply bounds to net"

    with pytest.raises(TypeError):
        apply_attribute("not an object", Attribute(AttributeKind.Y, 1))
