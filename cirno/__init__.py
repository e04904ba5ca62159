"""
Cirno

Compiling ASCII circuit schematics: parsing, chip flattening, validation, and voltage resolution.
"""

__version__ = "0.1.0"

import warnings
from pathlib import Path

# Configure warning format to be more concise (single line, no source code repetition)
# This applies globally whenever the cirno package is imported
def _warning_on_one_line(message, category, filename, lineno, file=None, line=None):
    return f'{Path(filename).name}:{lineno}: {category.__name__}: {message}\n'

warnings.formatwarning = _warning_on_one_line


from .data import *
from .error import *
from .lex import Lexer, Token, Tokens, lex
from .parse import parse, parse_str, parse_files, apply_attribute, verify
from .geometry import overlapping, overlapping_point
from .library import StdLib, Templates
from .labels import LabelWires, wire_label
from .flatten import SizeRegions, Flatten
from .voltage import ResolveVoltages
from .validate import Validate, validate, find_meta
from .logger import Logger, Level, LogItem
from .project import Project
from .compile import compile, LoadOptions
from .session import Session
