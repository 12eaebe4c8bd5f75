"""
Error taxonomy for module loading.

Every failure raised by the loader is a ModuleLoadError carrying an
ErrorKind, so callers can handle a single exception type and dispatch
on the kind when they need to:

- IO: directory listing or file read/decode failures
- PARSE: the HCL parser rejected a file's syntax
- STRUCTURAL: a declaration has a shape the extractors cannot interpret
- OTHER: any other failure reported by the parser
"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional


class ErrorKind(Enum):
    """Kinds of module loading failures."""
    IO = "io"
    PARSE = "parse"
    STRUCTURAL = "structural"
    OTHER = "other"


class ModuleLoadError(Exception):
    """Base class for all module loading errors."""

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class IoError(ModuleLoadError):
    """A directory or file could not be read."""

    kind = ErrorKind.IO


class ParseError(ModuleLoadError):
    """A file is not syntactically valid HCL."""

    kind = ErrorKind.PARSE


class OtherError(ModuleLoadError):
    """The parser failed for a reason other than a syntax error."""

    kind = ErrorKind.OTHER


class StructuralError(ModuleLoadError):
    """A declaration has an unexpected shape. Never suppressed by strictness."""

    kind = ErrorKind.STRUCTURAL


class UnexpectedExpressionError(StructuralError):
    """A required_providers entry is not an object."""

    def __init__(self, attribute_key: str, expr: Any, file_name: Path):
        self.attribute_key = attribute_key
        self.expr = expr
        self.file_name = file_name
        super().__init__(
            f"unexpected expression for attribute {attribute_key!r} "
            f"in {file_name}: {expr!r}",
            path=file_name,
        )


class ConflictingProviderSourceError(StructuralError):
    """The same provider was declared with two different sources."""

    def __init__(
        self,
        provider_name: str,
        existing_source: str,
        new_source: str,
        file_name: Optional[Path] = None,
    ):
        self.provider_name = provider_name
        self.existing_source = existing_source
        self.new_source = new_source
        super().__init__(
            f"conflicting source for provider {provider_name!r}: "
            f"{existing_source!r} vs {new_source!r}",
            path=file_name,
        )
