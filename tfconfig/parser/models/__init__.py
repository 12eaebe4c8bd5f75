"""
Module Models - Data structures for extracted module requirements.
"""

from .module_model import (
    ProviderRef,
    ProviderRequirement,
    Module,
)

__all__ = [
    'ProviderRef',
    'ProviderRequirement',
    'Module',
]
