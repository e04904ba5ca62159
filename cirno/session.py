"""
# Editor Session

Holds the currently-open project, and the diagnostics of failed loads for the status line.
"""

import os
from pathlib import Path
from dataclasses import replace
from typing import List, Optional, Union

from .compile import LoadOptions, compile
from .data import ErrorMode, Vector2
from .error import CirnoError
from .logger import Logger
from .project import Project


class Session:
    """
    Editor Session.
    A successful load replaces the open project.
    A failed load leaves it in place and records a diagnostic in `errors`,
    then re-raises if `options.errormode` is `RAISE`.
    """

    def __init__(self, options: Optional[LoadOptions] = None, logger: Optional[Logger] = None):
        self.options = options if options is not None else LoadOptions(errormode=ErrorMode.STORE)
        self.logger = logger if logger is not None else Logger()
        self.project: Optional[Project] = None
        self.errors: List[str] = []

    def open(self, path: Union[str, os.PathLike]) -> bool:
        """Open the project file at `path`"""
        return self._load(Path(path))

    def load(self, src: str) -> bool:
        """Load a project from source text"""
        return self._load(src)

    def resize(self, columns: int, rows: int) -> None:
        """Record a new terminal size, applied from the next load"""
        self.options = replace(self.options, viewport=Vector2(columns, rows))

    def clear_errors(self) -> None:
        self.errors.clear()

    def _load(self, src: Union[str, Path]) -> bool:
        options = replace(self.options, errormode=ErrorMode.RAISE)
        try:
            project = compile(src, options=options, logger=self.logger)
        except CirnoError as e:
            self.errors.append(str(e))
            if self.options.errormode == ErrorMode.RAISE:
                raise
            return False
        self.project = project
        return True
