"""
# Wire Label Allocation

Each wire is labeled with a single letter, unique among wires of its color:
`a` through `z`, then `A` through `Z`, in source order.
"""

from typing import Dict, List

from .data import MAX_WIRES_PER_COLOR, Color, Object, Wire
from .error import TooManyWiresOfColor
from .transform import Pass


def wire_label(count: int) -> str:
    """Label of the `count`-th (zero-based) wire of a color"""
    if count < 26:
        return chr(ord("a") + count)
    if count < MAX_WIRES_PER_COLOR:
        return chr(ord("A") + count - 26)
    raise ValueError(f"No wire label for count {count}")


class LabelWires(Pass):
    """Assign per-color labels to every wire, in place."""

    def run(self, objects: List[Object]) -> List[Object]:
        counts: Dict[Color, int] = {color: 0 for color in Color}
        for obj in objects:
            if not isinstance(obj, Wire):
                continue
            count = counts[obj.color]
            if count >= MAX_WIRES_PER_COLOR:
                raise TooManyWiresOfColor(obj.color.value)
            obj.label = wire_label(count)
            counts[obj.color] = count + 1

        used = {color.value: n for color, n in counts.items() if n}
        self.logger.debug(f"labeled wires: {used}")
        return objects
