"""
# Object-List Transformation Passes

Each load stage between parsing and validation, and between validation and rendering,
is a `Pass` over the project's ordered object list.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .data import Object
from .logger import Logger


class Pass(ABC):
    """Base class for object-list transformation passes."""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger if logger is not None else Logger()

    @abstractmethod
    def run(self, objects: List[Object]) -> List[Object]:
        """Run the pass on `objects`, returning the new (or modified) object list."""
        pass
