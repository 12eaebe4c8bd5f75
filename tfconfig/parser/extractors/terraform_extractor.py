"""
Terraform Block Extractor - Extract module metadata declarations.

Walks the top-level blocks of a document and, for every ``terraform``
block, collects ``required_version`` constraints and delegates nested
``required_providers`` blocks. Other blocks and attributes are ignored.
"""

from pathlib import Path
from typing import Optional

from .base import BaseExtractor
from .providers_extractor import RequiredProvidersExtractor
from ..document import Body, unquote
from ..models import Module

REQUIRED_VERSION = "required_version"


class TerraformBlockExtractor(BaseExtractor):
    """Extractor for top-level ``terraform`` blocks."""

    def __init__(self, providers_extractor: Optional[RequiredProvidersExtractor] = None):
        self._providers_extractor = providers_extractor or RequiredProvidersExtractor()

    @property
    def block_identifier(self) -> str:
        return "terraform"

    def extract(self, current_file: Path, body: Body, module: Module) -> None:
        """
        Extract from a document's top-level body.

        Args:
            current_file: File the document was parsed from
            body: Top-level body of the document
            module: Module to merge into
        """
        for block in body.blocks_named(self.block_identifier):
            self._handle_terraform_block(current_file, block.body, module)

    def _handle_terraform_block(self, current_file: Path, body: Body, module: Module) -> None:
        for attr in body.attributes_named(REQUIRED_VERSION):
            module.add_required_core(unquote(attr.expr))

        providers_id = self._providers_extractor.block_identifier
        for inner in body.blocks_named(providers_id):
            self._providers_extractor.extract(current_file, inner.body, module)
