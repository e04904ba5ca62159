"""
# Chip Standard Library

Chip types name pin templates, `.cic` files written in the same grammar as projects.
The bundled library ships under `cirno/stdlib`; `gates/and2` names `stdlib/gates/and2.cic`.
"""

# Std-Lib Imports
import os
from pathlib import Path
from importlib.resources import files
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

# Local Imports
from .data import Pin, Region, Vector2, object_kind
from .error import CirnoError, CouldNotOpenLibrary, InvalidTemplate, NotFoundInStdlib
from .logger import Logger
from .parse import TEMPLATE_SUFFIX, parse_str


def bundled_root():
    """Root of the bundled template library"""
    return files(__package__).joinpath("stdlib")


def index_templates(root, prefix: str = "") -> Iterator[Tuple[str, object]]:
    """Walk the directory (or `importlib` traversable) `root`,
    yielding (chip type, template entry) pairs."""
    for entry in sorted(root.iterdir(), key=lambda e: e.name):
        if entry.is_dir():
            yield from index_templates(entry, f"{prefix}{entry.name}/")
        elif entry.name.endswith(TEMPLATE_SUFFIX):
            yield prefix + entry.name[: -len(TEMPLATE_SUFFIX)], entry


class StdLib:
    """Template text source.
    Chip types are matched exactly against the indexed template names.
    The bundled library takes priority over any additional `paths`."""

    def __init__(self, paths: Sequence[os.PathLike] = ()):
        self.index: Dict[str, object] = {}
        roots = [bundled_root()] + [Path(p) for p in paths]
        for root in roots:
            if not root.is_dir():
                raise CouldNotOpenLibrary(root)
            for tp, entry in index_templates(root):
                self.index.setdefault(tp, entry)

    def types(self) -> List[str]:
        """All resolvable chip types"""
        return sorted(self.index.keys())

    def resolve(self, tp: str) -> str:
        """Get the template text for chip type `tp`"""
        entry = self.index.get(tp, None)
        if entry is None:
            raise NotFoundInStdlib(tp)
        try:
            return entry.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidTemplate(tp, str(e)) from e


def place_pins(pins: List[Pin]) -> List[Pin]:
    """
    Assign template-local positions in a two-row, DIP-style footprint.
    The first half of the pins run left-to-right along the bottom row;
    the second half continue right-to-left along the top row.
    """
    width = len(pins) // 2
    for i, pin in enumerate(pins):
        if i < width:
            pos = Vector2(i, 2)
        else:
            pos = Vector2(width * 2 - i - 1, 0)
        pin.region = Region(position=pos, size=Vector2(1, 1))
    return pins


class Templates:
    """Parsed and positioned chip templates, cached per chip type for one project load."""

    def __init__(self, stdlib: Optional[StdLib] = None, logger: Optional[Logger] = None):
        self.stdlib = stdlib if stdlib is not None else StdLib()
        self.logger = logger if logger is not None else Logger()
        self.cache: Dict[str, List[Pin]] = {}

    def get(self, tp: str) -> List[Pin]:
        """Get the template pins for chip type `tp`.
        Callers must not modify the returned pins."""
        if tp not in self.cache:
            self.cache[tp] = self.load(tp)
        return self.cache[tp]

    def load(self, tp: str) -> List[Pin]:
        text = self.stdlib.resolve(tp)
        try:
            objects = parse_str(text)
        except CirnoError as e:
            raise InvalidTemplate(tp, str(e)) from e

        for obj in objects:
            if not isinstance(obj, Pin):
                raise InvalidTemplate(tp, f"{object_kind(obj).value} object in template")
        if not objects:
            raise InvalidTemplate(tp, "no pins")
        if len(objects) % 2:
            raise InvalidTemplate(tp, f"odd number of pins ({len(objects)})")

        self.logger.debug(f"loaded template {tp} with {len(objects)} pins")
        return place_pins(objects)
