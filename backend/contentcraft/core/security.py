"""
Security utilities for file and record access
Prevents path traversal through stored document paths and record IDs.
"""

import re
from pathlib import Path

from .logging import get_logger

logger = get_logger(__name__, component="security")

_SAFE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def is_safe_record_id(record_id: str) -> bool:
    """Check that a record ID can be used as a file name.

    Example:
        >>> is_safe_record_id("3f2c9a")
        True
        >>> is_safe_record_id("../passwd")
        False
    """
    return bool(record_id) and bool(_SAFE_ID_PATTERN.fullmatch(str(record_id)))


def validate_path_within_directory(path: Path, allowed_directory: Path) -> bool:
    """
    Validate that a path resolves inside an allowed directory

    Symlinks and relative segments are resolved before comparison, so
    "/uploads/../etc/passwd" is rejected.
    """
    try:
        resolved = path.resolve()
        allowed = allowed_directory.resolve()
    except (OSError, RuntimeError) as e:
        logger.warning("Path resolution failed", extra={"path": str(path), "error": str(e)})
        return False

    if resolved == allowed or allowed in resolved.parents:
        return True

    logger.warning("Path escapes allowed directory", extra={
        "path": str(path),
        "allowed_directory": str(allowed),
    })
    return False
