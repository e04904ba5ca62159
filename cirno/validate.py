"""
# Project Validation

Structural and bounds checks, run once regions are sized and wires labeled, before flattening.
Checks run in a fixed order and the first failure aborts the load.
"""

from typing import List, Optional

from .data import BORDER, Chip, Meta, Net, NetType, Object, Pin, Vector2, Wire, region_of
from .error import (
    InvalidValueForAttribute,
    InvalidWire,
    MetaObjectError,
    MissingAttribute,
    MissingMetaObject,
    NamelessInvalidValueForAttribute,
    OutOfBounds,
    OverlappingRegion,
    TerminalTooSmall,
)
from .geometry import overlapping
from .logger import Logger
from .transform import Pass


def find_meta(objects: List[Object]) -> Meta:
    """Get the project's single `Meta` object"""
    metas = [obj for obj in objects if isinstance(obj, Meta)]
    if not metas:
        raise MissingMetaObject()
    if len(metas) > 1:
        raise MetaObjectError(len(metas))
    return metas[0]


def in_bounds(point: Vector2, bounds: Vector2) -> bool:
    return 0 <= point.x < bounds.x and 0 <= point.y < bounds.y


def check_bounds(meta: Meta) -> None:
    bounds = meta.bounds
    if bounds.x == 0 and bounds.y == 0:
        raise MissingAttribute("bounds")
    if bounds.x == 0 or bounds.y == 0:
        raise NamelessInvalidValueForAttribute("bounds")


def check_viewport(meta: Meta, viewport: Vector2) -> None:
    """The terminal must fit the canvas plus its border"""
    needed = meta.bounds + Vector2(BORDER, BORDER)
    if viewport.x < needed.x or viewport.y < needed.y:
        raise TerminalTooSmall(needed, viewport)


def check_object(obj: Object, bounds: Vector2) -> None:
    if isinstance(obj, Meta):
        return
    if isinstance(obj, Chip):
        if not obj.type:
            raise MissingAttribute("type")
        pos = obj.region.position
        far = pos + obj.region.size + Vector2(-1, -1)
        if not in_bounds(pos, bounds) or not in_bounds(far, bounds):
            raise OutOfBounds("chip", pos)
        return
    if isinstance(obj, Net):
        if obj.type not in (t.value for t in NetType):
            raise InvalidValueForAttribute(obj.type, "type")
        if obj.region.position.y >= bounds.y:
            raise OutOfBounds("net", obj.region.position)
        return
    if isinstance(obj, Pin):
        if not in_bounds(obj.region.position, bounds):
            raise OutOfBounds("pin", obj.region.position)
        return
    if isinstance(obj, Wire):
        for point in (obj.from_, obj.to):
            if not in_bounds(point, bounds):
                raise OutOfBounds("wire", point)
        if obj.from_ == obj.to:
            raise InvalidWire(obj.from_)
        return
    raise TypeError(f"Invalid object {obj}")


def check_overlaps(objects: List[Object]) -> None:
    """No two region-bearing objects may share a cell.
    Pairs are checked in ascending index order; indices are into `objects`."""
    regions = [
        (i, region)
        for i, region in enumerate(region_of(obj) for obj in objects)
        if region is not None and not region.degenerate
    ]
    for n, (i, a) in enumerate(regions):
        for j, b in regions[n + 1 :]:
            if overlapping(a, b):
                raise OverlappingRegion(i, j)


def validate(objects: List[Object], meta: Meta, viewport: Optional[Vector2] = None) -> None:
    """Validate a sized, wire-labeled project.
    The terminal-size check is skipped when no `viewport` is given."""
    check_bounds(meta)
    if viewport is not None:
        check_viewport(meta, viewport)
    for obj in objects:
        check_object(obj, meta.bounds)
    check_overlaps(objects)


class Validate(Pass):
    """Validation, as a pass. Returns `objects` unchanged."""

    def __init__(self, meta: Meta, viewport: Optional[Vector2] = None, logger: Optional[Logger] = None):
        super().__init__(logger)
        self.meta = meta
        self.viewport = viewport

    def run(self, objects: List[Object]) -> List[Object]:
        validate(objects, self.meta, self.viewport)
        self.logger.debug(f"validated {len(objects)} objects")
        return objects
