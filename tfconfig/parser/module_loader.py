"""
Module Loader - Main orchestrator for loading a Terraform module.

Coordinates file discovery, parsing and extraction to turn a directory
of configuration files into a single Module:
1. Discover files (primary files first, then overrides)
2. Read and parse each file
3. Extract declarations and merge them into the module

In non-strict mode a file that cannot be read or has a syntax error
is skipped. Structural errors and other parser failures always abort.
"""

from pathlib import Path
from typing import Optional

from .discovery import discover_files
from .document import Body, parse_document
from .extractors import TerraformBlockExtractor
from .models import Module
from ..core.config import AppConfig
from ..core.errors import IoError, ParseError
from ..utils.logger import get_logger, setup_logging, is_configured, log_operation

logger = get_logger(__name__)


class ModuleLoader:
    """
    Loads a directory of Terraform configuration into a Module.

    Example:
        loader = ModuleLoader()
        module = loader.load("./infra", strict=True)
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the loader.

        Args:
            config: Application configuration (defaults if None). Logging
                handlers are only installed from an explicit config.
        """
        self.config = config or AppConfig()
        self._extractor = TerraformBlockExtractor()

        if config is not None and not is_configured():
            setup_logging(
                level=self.config.logging.level,
                format_string=self.config.logging.format,
                log_file=self.config.logging.file,
            )

    def load(self, path: Path | str, strict: Optional[bool] = None) -> Module:
        """
        Read the directory at the given path as a Terraform module.

        Args:
            path: Directory containing the configuration
            strict: Abort on the first unreadable or unparsable file.
                Falls back to the loader configuration if None.

        Returns:
            Module with the merged requirements of all files

        Raises:
            ModuleLoadError: On the first fatal error; no partial module
                is returned
        """
        path = Path(path)
        if strict is None:
            strict = self.config.loader.strict

        module = Module.new(path)

        with log_operation(logger, "Loading module", path=path, strict=strict):
            for file_name in discover_files(path):
                document = self._read_document(file_name, strict)
                if document is None:
                    continue

                self.load_file(file_name, document, module)

        logger.info(f"Loaded module {path}: {module.summary()}")

        return module

    def load_file(self, current_file: Path | str, document: Body, module: Module) -> None:
        """
        Extract an already-parsed file into the given module.

        Args:
            current_file: File the document was parsed from
            document: Parsed top-level body
            module: Module to merge into

        Raises:
            StructuralError: If a declaration has an unexpected shape or
                conflicts with an earlier file
        """
        self._extractor.extract(Path(current_file), document, module)

    def _read_document(self, file_name: Path, strict: bool) -> Optional[Body]:
        """Read and parse a file, or return None if it is skipped."""
        try:
            contents = file_name.read_text(encoding=self.config.loader.encoding)
        except (OSError, UnicodeDecodeError) as e:
            error = IoError(f"Failed to read {file_name}: {e}", path=file_name)
            if strict:
                raise error from e
            logger.warning(f"Skipping unreadable file: {error}")
            return None

        try:
            return parse_document(contents, path=file_name)
        except ParseError as e:
            if strict:
                raise
            logger.warning(f"Skipping unparsable file: {e}")
            return None


def load_module(path: Path | str, strict: bool) -> Module:
    """
    Read the directory at the given path as a Terraform module.

    Args:
        path: Directory containing the configuration
        strict: Whether to raise immediately if a file cannot be read or parsed

    Returns:
        Module with the merged requirements of all files
    """
    return ModuleLoader().load(path, strict=strict)


def load_module_from_file(current_file: Path | str, document: Body, module: Module) -> None:
    """Extract one already-parsed file into the given module."""
    ModuleLoader().load_file(current_file, document, module)
