"""
File Discovery - Locate the configuration files of a module directory.

Primary files are returned first, followed by override files
(``override.*`` and ``*_override.*``). Within each group the order is
whatever the filesystem listing returns.
"""

from pathlib import Path
from typing import List

from ..core.errors import IoError
from ..utils.logger import get_logger

logger = get_logger(__name__)

OVERRIDE_NAME = "override"
OVERRIDE_SUFFIX = "_override"


def _is_ignored_extension(path: Path) -> bool:
    """Check for a missing extension or an editor/swap/backup artifact."""
    if not path.suffix:
        return True

    ext = path.suffix[1:]
    try:
        ext.encode('utf-8')
    except UnicodeEncodeError:
        return True

    return (
        ext.startswith('.')
        or ext.startswith('#')
        or ext.endswith('~')
        or ext.endswith('#')
    )


def is_override_file(path: Path) -> bool:
    """Whether a file is an override file by naming convention."""
    stem = path.stem
    return stem == OVERRIDE_NAME or stem.endswith(OVERRIDE_SUFFIX)


def discover_files(directory: Path | str) -> List[Path]:
    """
    List the candidate files of a module directory.

    Args:
        directory: Module directory

    Returns:
        Primary files followed by override files

    Raises:
        IoError: If the directory or one of its entries cannot be read
    """
    directory = Path(directory)
    primary: List[Path] = []
    overrides: List[Path] = []

    try:
        for path in directory.iterdir():
            if path.is_dir():
                continue
            if _is_ignored_extension(path):
                continue

            if is_override_file(path):
                overrides.append(path)
            else:
                primary.append(path)
    except OSError as e:
        raise IoError(f"Failed to read directory {directory}: {e}", path=directory) from e

    logger.debug(
        f"Discovered {len(primary)} primary and {len(overrides)} override file(s) in {directory}"
    )

    return primary + overrides
