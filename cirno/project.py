"""
# Loaded Projects

The validated, flattened, voltage-resolved model handed to the renderer and other read-only consumers.
"""

from typing import List, Optional, Tuple, Union

from pydantic.dataclasses import dataclass

from .data import Color, Meta, Net, Object, Pin, Vector2, Wire, describe, region_of
from .geometry import overlapping_point


@dataclass
class Project:
    """Loaded Project.
    `objects` is in source order, with every chip replaced by its pins."""

    meta: Meta
    objects: Tuple[Object, ...]

    @property
    def bounds(self) -> Vector2:
        return self.meta.bounds

    @property
    def pins(self) -> List[Pin]:
        return [obj for obj in self.objects if isinstance(obj, Pin)]

    @property
    def wires(self) -> List[Wire]:
        return [obj for obj in self.objects if isinstance(obj, Wire)]

    @property
    def nets(self) -> List[Net]:
        return [obj for obj in self.objects if isinstance(obj, Net)]

    def pin(self, label: str) -> Optional[Pin]:
        """Get the first pin labeled `label`"""
        return next((p for p in self.pins if p.label == label), None)

    def object_at(self, point: Vector2) -> Optional[Object]:
        """Get the first object covering `point`, as under the editor's cursor.
        Wires cover only their two endpoints."""
        for obj in self.objects:
            if isinstance(obj, Wire):
                if point in (obj.from_, obj.to):
                    return obj
                continue
            region = region_of(obj)
            if region is None or region.degenerate:
                continue
            if overlapping_point(region, point):
                return obj
        return None

    def report(self, point: Vector2) -> str:
        """Status-line description of whatever lies at `point`"""
        obj = self.object_at(point)
        if obj is None:
            return f"({point.x}, {point.y})"
        return describe(obj)

    def find_wires(self, color: Union[Color, str], label: Optional[str] = None) -> List[Wire]:
        """Wires of `color`, optionally restricted to those labeled `label`"""
        color = Color(color)
        return [
            w for w in self.wires if w.color == color and (label is None or w.label == label)
        ]
