"""

# Cirno Data Model

All elements of a schematic project, from parsed attributes to flattened pins,
primarily in the form of dataclasses.

"""

# Std-Lib Imports
from enum import Enum
from pathlib import Path
from dataclasses import field
from typing import Optional, Union, List, Any

# PyPi Imports
from pydantic.dataclasses import dataclass


# Width of the border drawn around the canvas, in terminal cells
BORDER = 2
# Every chip is three rows tall: a row of pins, the body, and another row of pins
CHIP_HEIGHT = 3
# Wire labels run `a..z` then `A..Z`
MAX_WIRES_PER_COLOR = 52
# Largest value of a terminal-cell coordinate
MAX_COORD = 0xFFFF


class ErrorMode(Enum):
    """Enumerated Error-Response Strategies"""

    RAISE = 0  # Raise any generated exceptions
    STORE = 1  # Store the diagnostic and return no model


class Color(Enum):
    """Wire Colors"""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"


class NetType(Enum):
    """Power-Rail Types"""

    VCC = "vcc"
    GND = "gnd"


class Voltage(Enum):
    """Derived electrical state of a pin.
    Never set by the parser, only by the voltage resolver."""

    FLOATING = "floating"
    HIGH = "high"
    LOW = "low"


class ValueKind(Enum):
    """Declared logical content of a pin"""

    NONE = "none"
    GND = "gnd"
    VCC = "vcc"
    AND = "and"
    OR = "or"


class AttributeKind(Enum):
    """Attribute names, keyed by their keyword in source text"""

    BOUNDS = "bounds"
    COLOR = "color"
    FROM = "from"
    TO = "to"
    LABEL = "label"
    NUM = "num"
    POSITION = "pos"
    TYPE = "type"
    VALUE = "value"
    Y = "y"


class ObjectKind(Enum):
    """Object kinds, keyed by their keyword in source text"""

    CHIP = "chip"
    META = "meta"
    NET = "net"
    PIN = "pin"
    WIRE = "wire"


@dataclass
class Vector2:
    """Terminal-cell coordinate. Never negative."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)


@dataclass
class Region:
    """Axis-aligned rectangle, covering `size` cells in each dimension from `position`."""

    position: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=lambda: Vector2(1, 1))

    @property
    def degenerate(self) -> bool:
        return self.size.x == 0 or self.size.y == 0


@dataclass
class Value:
    """Pin Value.
    `labels` is only populated for `AND` and `OR` values."""

    kind: ValueKind = ValueKind.NONE
    labels: List[str] = field(default_factory=list)

    @property
    def is_logic(self) -> bool:
        return self.kind in (ValueKind.AND, ValueKind.OR)


@dataclass
class Attribute:
    """Parsed key/value pair, not yet applied to any object.
    The type of `val` depends on `kind`: `Vector2` for bounds, pos, from and to;
    `int` for y and num; `str` for type and label; `Color` for color; `Value` for value."""

    kind: AttributeKind
    val: Any


@dataclass
class SourceInfo:
    """Parser Source Information"""

    line: int  # Source-File Line Number
    path: Optional[Path] = None  # Source File, if parsed from one


# Keep a list of object datatypes defined here, for export and dispatch
datatypes = []


def datatype(cls: type) -> type:
    """Register a class as an object datatype, and convert it to a `pydantic.dataclasses.dataclass`."""
    cls = dataclass(cls)
    datatypes.append(cls)
    return cls


@datatype
class Meta:
    """Project Metadata. Exactly one per project; defines the canvas."""

    bounds: Vector2 = field(default_factory=Vector2)
    source_info: Optional[SourceInfo] = None


@datatype
class Chip:
    """Chip Instance.
    `region.size` is derived from the chip's template, never set in source."""

    type: str = ""
    region: Region = field(default_factory=lambda: Region(size=Vector2(0, CHIP_HEIGHT)))
    source_info: Optional[SourceInfo] = None


@datatype
class Net:
    """Power or ground rail, one row tall and spanning the canvas width."""

    type: str = ""
    region: Region = field(default_factory=lambda: Region(size=Vector2(0, 1)))
    source_info: Optional[SourceInfo] = None


@datatype
class Pin:
    """Single-cell Pin"""

    label: str = ""
    value: Value = field(default_factory=Value)
    voltage: Voltage = Voltage.FLOATING
    region: Region = field(default_factory=Region)
    num: Optional[int] = None  # Pin number, informational
    source_info: Optional[SourceInfo] = None


@datatype
class Wire:
    """Wire between two points.
    `label` is assigned by the wire-label allocator, never parsed."""

    color: Optional[Color] = None
    from_: Vector2 = field(default_factory=Vector2)
    to: Vector2 = field(default_factory=Vector2)
    label: str = ""
    source_info: Optional[SourceInfo] = None


# Union of all object kinds
Object = Union[Meta, Chip, Net, Pin, Wire]

# Objects exposing a `Region`, subject to overlap checking
RegionObject = Union[Chip, Net, Pin]


def object_kind(obj: Object) -> ObjectKind:
    """Get the `ObjectKind` of `obj`"""
    if isinstance(obj, Meta):
        return ObjectKind.META
    if isinstance(obj, Chip):
        return ObjectKind.CHIP
    if isinstance(obj, Net):
        return ObjectKind.NET
    if isinstance(obj, Pin):
        return ObjectKind.PIN
    if isinstance(obj, Wire):
        return ObjectKind.WIRE
    raise TypeError(f"Invalid object {obj}")


def new_object(kind: ObjectKind) -> Object:
    """Create a default object of kind `kind`"""
    if kind == ObjectKind.META:
        return Meta()
    if kind == ObjectKind.CHIP:
        return Chip()
    if kind == ObjectKind.NET:
        return Net()
    if kind == ObjectKind.PIN:
        return Pin()
    if kind == ObjectKind.WIRE:
        return Wire()
    raise TypeError(f"Invalid object kind {kind}")


def region_of(obj: Object) -> Optional[Region]:
    """Get the `Region` of `obj`, or `None` for objects lacking one (`Meta` and `Wire`)."""
    if isinstance(obj, (Chip, Net, Pin)):
        return obj.region
    if isinstance(obj, (Meta, Wire)):
        return None
    raise TypeError(f"Invalid object {obj}")


def describe_value(value: Value) -> str:
    if value.is_logic:
        return f"{value.kind.value} {' '.join(value.labels)}"
    return value.kind.value


def describe(obj: Object) -> str:
    """One-line, human-readable report of `obj`, as for the editor's status line."""
    if isinstance(obj, Meta):
        return f"meta {obj.bounds.x}x{obj.bounds.y}"
    if isinstance(obj, Chip):
        pos = obj.region.position
        return f"chip {obj.type} at ({pos.x}, {pos.y})"
    if isinstance(obj, Net):
        return f"net {obj.type} at y {obj.region.position.y}"
    if isinstance(obj, Pin):
        pos = obj.region.position
        label = obj.label or "(unlabeled)"
        return f"pin {label} at ({pos.x}, {pos.y}): {describe_value(obj.value)}, {obj.voltage.value}"
    if isinstance(obj, Wire):
        color = obj.color.value if obj.color else "uncolored"
        return (
            f"wire {color} {obj.label} from ({obj.from_.x}, {obj.from_.y})"
            f" to ({obj.to.x}, {obj.to.y})"
        )
    raise TypeError(f"Invalid object {obj}")


__all__ = [tp.__name__ for tp in datatypes] + [
    "BORDER",
    "CHIP_HEIGHT",
    "MAX_WIRES_PER_COLOR",
    "MAX_COORD",
    "ErrorMode",
    "Color",
    "NetType",
    "Voltage",
    "ValueKind",
    "AttributeKind",
    "ObjectKind",
    "Vector2",
    "Region",
    "Value",
    "Attribute",
    "SourceInfo",
    "Object",
    "RegionObject",
    "object_kind",
    "new_object",
    "region_of",
    "describe",
    "describe_value",
]
