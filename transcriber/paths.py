"""
Path resolution and file size formatting.

Resolution is total: it always returns a string and never raises. Whether the
returned path exists is checked by the caller at the point of use.
"""

import logging
import os

logger = logging.getLogger(__name__)

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def _exists(path: str) -> bool:
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        # Embedded NUL bytes and similar make the path unusable
        return False


def resolve_file_path(reference: str, base_path: str = "") -> str:
    """Map a user supplied file reference to a concrete path.

    Resolution order, first match wins:
        1. An absolute path that exists is returned unchanged.
        2. ``<base_path>/<basename(reference)>`` if it exists.
        3. ``<base_path>/<reference>`` if it exists (keeps relative sub-paths).
        4. The reference unchanged.

    Args:
        reference: Absolute path, relative path or bare filename
        base_path: Optional directory to look in, empty when unset

    Returns:
        Best-effort path string
    """
    if os.path.isabs(reference) and _exists(reference):
        return reference

    if base_path:
        with_base = os.path.join(base_path, os.path.basename(reference))
        if _exists(with_base):
            logger.info(f'Resolved "{reference}" to "{with_base}" using TRANSCRIBE_BASE_PATH')
            return with_base

        full_path = os.path.join(base_path, reference)
        if _exists(full_path):
            logger.info(f'Resolved "{reference}" to "{full_path}" using TRANSCRIBE_BASE_PATH')
            return full_path

    return reference


def format_file_size(size: int) -> str:
    """Return a human readable size such as ``1.5 KB`` or ``0 Bytes``."""
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1
    # Drop trailing zeros: 1.50 -> 1.5, 2.00 -> 2
    return f"{round(value, 2):g} {SIZE_UNITS[index]}"
