"""
Core module - Configuration and the loader error taxonomy.
"""

from .config import (
    AppConfig,
    LoaderConfig,
    LoggingConfig,
    get_default_config,
    load_config,
)
from .errors import (
    ErrorKind,
    ModuleLoadError,
    IoError,
    ParseError,
    OtherError,
    StructuralError,
    UnexpectedExpressionError,
    ConflictingProviderSourceError,
)

__all__ = [
    # Config classes
    'AppConfig',
    'LoaderConfig',
    'LoggingConfig',
    # Config functions
    'get_default_config',
    'load_config',
    # Errors
    'ErrorKind',
    'ModuleLoadError',
    'IoError',
    'ParseError',
    'OtherError',
    'StructuralError',
    'UnexpectedExpressionError',
    'ConflictingProviderSourceError',
]
