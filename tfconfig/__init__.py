"""
tfconfig - Extract the declared requirements of a Terraform module.

Main modules:
- parser: Discover, parse and extract module requirements
- core: Configuration and error types
- utils: Logging helpers
"""

from .parser import (
    Module,
    ProviderRequirement,
    ProviderRef,
    ModuleLoader,
    load_module,
    load_module_from_file,
    parse_document,
    discover_files,
)
from .core import (
    AppConfig,
    load_config,
    ErrorKind,
    ModuleLoadError,
    IoError,
    ParseError,
    OtherError,
    StructuralError,
    UnexpectedExpressionError,
    ConflictingProviderSourceError,
)

__version__ = "1.0.0"

__all__ = [
    'Module',
    'ProviderRequirement',
    'ProviderRef',
    'ModuleLoader',
    'load_module',
    'load_module_from_file',
    'parse_document',
    'discover_files',
    'AppConfig',
    'load_config',
    'ErrorKind',
    'ModuleLoadError',
    'IoError',
    'ParseError',
    'OtherError',
    'StructuralError',
    'UnexpectedExpressionError',
    'ConflictingProviderSourceError',
    '__version__',
]
