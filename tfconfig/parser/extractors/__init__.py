"""
Extractors - Walk parsed documents for the declarations of interest.

- TerraformBlockExtractor: top-level ``terraform`` blocks (required_version)
- RequiredProvidersExtractor: nested ``required_providers`` blocks
"""

from .base import BaseExtractor
from .terraform_extractor import TerraformBlockExtractor
from .providers_extractor import RequiredProvidersExtractor

__all__ = [
    'BaseExtractor',
    'TerraformBlockExtractor',
    'RequiredProvidersExtractor',
]
