"""
Required Providers Extractor - Extract provider requirements.

Handles the body of a ``required_providers`` block:

    required_providers {
      mycloud = {
        source  = "mycorp/mycloud"
        version = "~> 1.0"
      }
    }
"""

from pathlib import Path

from .base import BaseExtractor
from ..document import Body, unquote, get_object_field
from ..models import Module, ProviderRequirement
from ...core.errors import UnexpectedExpressionError
from ...utils.logger import get_logger

logger = get_logger(__name__)


class RequiredProvidersExtractor(BaseExtractor):
    """Extractor for ``required_providers`` entries."""

    @property
    def block_identifier(self) -> str:
        return "required_providers"

    def extract(self, current_file: Path, body: Body, module: Module) -> None:
        for attr in body.attributes:
            provider_name = attr.key

            if not isinstance(attr.expr, dict):
                raise UnexpectedExpressionError(
                    attribute_key=provider_name,
                    expr=attr.expr,
                    file_name=current_file,
                )

            requirement = ProviderRequirement()

            source = get_object_field(attr.expr, "source")
            if source is not None:
                requirement.source = unquote(source)

            version = get_object_field(attr.expr, "version")
            if version is not None:
                requirement.version_constraints.append(unquote(version))

            logger.debug(
                f"Provider {provider_name!r} in {current_file}: "
                f"source={requirement.source!r}, versions={requirement.version_constraints}"
            )

            module.add_provider_requirement(provider_name, requirement, file_name=current_file)
