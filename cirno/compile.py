"""
# Cirno "Compilation"

Load a project from source text into its validated, flattened, voltage-resolved form.
Occurs in a fixed sequence of stages, any of which may abort the load:

1. Parsing produces the ordered object list
2. Sizing gives chips their template-derived size and nets the canvas width
3. Labeling assigns each wire its per-color label
4. Validation checks bounds, structure, and overlap
5. Flattening replaces chips with their pins
6. Voltage resolution derives each pin's electrical state
"""

import os
from pathlib import Path
from dataclasses import field
from typing import List, Optional, Union

from pydantic.dataclasses import dataclass

# Local Imports
from .data import ErrorMode, Vector2
from .error import CirnoError
from .flatten import Flatten, SizeRegions
from .labels import LabelWires
from .library import StdLib, Templates
from .logger import Logger
from .parse import parse
from .project import Project
from .validate import Validate, find_meta
from .voltage import ResolveVoltages


@dataclass
class LoadOptions:
    """Load Options"""

    viewport: Optional[Vector2] = None  # Terminal size. `None` skips the terminal-size check.
    stdlib_paths: List[Path] = field(default_factory=list)  # Additional template directories
    errormode: ErrorMode = ErrorMode.RAISE  # Error-handling mode


def compile(
    src: Union[str, os.PathLike],
    *,
    options: Optional[LoadOptions] = None,
    logger: Optional[Logger] = None,
    stdlib: Optional[StdLib] = None,
) -> Optional[Project]:
    """
    Load the project `src`, either source text or a path to a project file.
    Failures are logged to `logger` and then, per `options.errormode`,
    either raised or answered with a `None` project.
    """
    if options is None:
        options = LoadOptions()
    if logger is None:
        logger = Logger()

    try:
        return _compile(src, options, logger, stdlib)
    except CirnoError as e:
        logger.error(str(e))
        if options.errormode == ErrorMode.RAISE:
            raise
        return None


def _compile(
    src: Union[str, os.PathLike],
    options: LoadOptions,
    logger: Logger,
    stdlib: Optional[StdLib],
) -> Project:
    objects = parse(src)
    logger.debug(f"parsed {len(objects)} objects")

    meta = find_meta(objects)
    if stdlib is None:
        stdlib = StdLib(options.stdlib_paths)
    templates = Templates(stdlib, logger)

    stages = [
        SizeRegions(templates, meta, logger),
        LabelWires(logger),
        Validate(meta, options.viewport, logger),
        Flatten(templates, logger),
        ResolveVoltages(logger),
    ]
    for stage in stages:
        objects = stage.run(objects)

    logger.info(f"loaded {len(objects)} objects on a {meta.bounds.x}x{meta.bounds.y} canvas")
    return Project(meta=meta, objects=tuple(objects))
