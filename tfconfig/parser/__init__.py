"""
Parser module - Discover, parse and extract Terraform module requirements.
"""

from .models import (
    ProviderRef,
    ProviderRequirement,
    Module,
)
from .document import (
    Attribute,
    Block,
    Body,
    parse_document,
    unquote,
)
from .discovery import discover_files, is_override_file
from .extractors import (
    BaseExtractor,
    TerraformBlockExtractor,
    RequiredProvidersExtractor,
)
from .module_loader import ModuleLoader, load_module, load_module_from_file

__all__ = [
    # Models
    'ProviderRef',
    'ProviderRequirement',
    'Module',
    # Document
    'Attribute',
    'Block',
    'Body',
    'parse_document',
    'unquote',
    # Discovery
    'discover_files',
    'is_override_file',
    # Extractors
    'BaseExtractor',
    'TerraformBlockExtractor',
    'RequiredProvidersExtractor',
    # Loading
    'ModuleLoader',
    'load_module',
    'load_module_from_file',
]
