"""
Base Extractor - Abstract base class for declaration extractors.

Extractors walk a parsed Body and merge what they find into a Module.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..document import Body
from ..models import Module


class BaseExtractor(ABC):
    """
    Abstract base class for declaration extractors.

    Each extractor handles one kind of block (e.g. the top-level
    ``terraform`` block or a nested ``required_providers`` block).
    """

    @property
    @abstractmethod
    def block_identifier(self) -> str:
        """Identifier of the block this extractor handles."""
        pass

    @abstractmethod
    def extract(self, current_file: Path, body: Body, module: Module) -> None:
        """
        Extract declarations from a body into the module.

        Args:
            current_file: File the body was parsed from
            body: Parsed body to walk
            module: Module to merge into

        Raises:
            StructuralError: If a declaration has an unexpected shape
        """
        pass
