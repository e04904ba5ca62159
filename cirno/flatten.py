"""
# Chip Sizing & Flattening

Chips are placed references to library templates.
Before validation each chip (and each net) is given its derived size;
after validation each chip is replaced, in place, by its template's pins,
moved to the chip's position and relabeled so that no two instances collide.
"""

from typing import Dict, Iterator, List, Optional

from .data import CHIP_HEIGHT, Chip, Meta, Net, Object, Pin, Region, Value, Vector2
from .library import Templates
from .logger import Logger
from .transform import Pass


class SizeRegions(Pass):
    """
    Derive region sizes, in place.
    Chips are half as wide as their template's pin count, and `CHIP_HEIGHT` tall.
    Nets span the full canvas width.
    """

    def __init__(self, templates: Templates, meta: Meta, logger: Optional[Logger] = None):
        super().__init__(logger)
        self.templates = templates
        self.meta = meta

    def run(self, objects: List[Object]) -> List[Object]:
        for obj in objects:
            if isinstance(obj, Chip):
                pins = self.templates.get(obj.type)
                obj.region.size = Vector2(len(pins) // 2, CHIP_HEIGHT)
            elif isinstance(obj, Net):
                obj.region.position = Vector2(0, obj.region.position.y)
                obj.region.size = Vector2(self.meta.bounds.x, 1)
        return objects


def short_type(tp: str) -> str:
    """Last `/`-segment of chip type `tp`, e.g. `and2` for `gates/and2`"""
    return tp.split("/")[-1]


def expand(chip: Chip, template: List[Pin], index: int) -> Iterator[Pin]:
    """Generate the pins of the `index`-th (one-based) instance of `chip`'s type.
    Labels, and the labels referenced by logic values, become `{label}_{short type}_{index}`."""
    suffix = f"_{short_type(chip.type)}_{index}"

    def rename(label: str) -> str:
        return label + suffix if label else label

    for pin in template:
        yield Pin(
            label=rename(pin.label),
            value=Value(pin.value.kind, [rename(label) for label in pin.value.labels]),
            voltage=pin.voltage,
            region=Region(position=pin.region.position + chip.region.position, size=Vector2(1, 1)),
            num=pin.num,
            source_info=chip.source_info,
        )


class Flatten(Pass):
    """Replace every `Chip` with its expanded pins, keeping source order."""

    def __init__(self, templates: Templates, logger: Optional[Logger] = None):
        super().__init__(logger)
        self.templates = templates

    def run(self, objects: List[Object]) -> List[Object]:
        # Instance counts, keyed by full chip type
        counts: Dict[str, int] = {}
        flat = []
        for obj in objects:
            if not isinstance(obj, Chip):
                flat.append(obj)
                continue
            counts[obj.type] = counts.get(obj.type, 0) + 1
            flat.extend(expand(obj, self.templates.get(obj.type), counts[obj.type]))

        self.logger.debug(f"flattened {sum(counts.values())} chips into {len(flat)} objects")
        return flat
