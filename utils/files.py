"""
Filesystem helpers used while scaffolding an application root.
"""

import os
import shutil
from pathlib import Path
from typing import Union
from utils.logger import get_logger

logger = get_logger("flow_installer.files")

PathLike = Union[str, os.PathLike]


def unix_style_path(path: PathLike) -> str:
    """
    Normalize a path to forward slashes without a trailing slash.

    Args:
        path: Any path, possibly using backslashes

    Returns:
        The path with "/" separators
    """
    normalized = os.fspath(path).replace("\\", "/")
    while "//" in normalized:
        normalized = normalized.replace("//", "/")
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")
    return normalized


def create_directory_recursively(path: PathLike) -> Path:
    """
    Create a directory and all missing parents. Existing directories are left alone.

    Args:
        path: Directory to create

    Returns:
        Path to the created/existing directory
    """
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Directory ensured: {directory}")
    return directory


def copy_directory_recursively(
    source: PathLike,
    target: PathLike,
    keep_existing_files: bool = False,
    copy_dot_files: bool = False
) -> int:
    """
    Copy the contents of a directory tree into another directory.

    Relative structure is preserved and missing directories are created.
    Errors from the underlying copy are not caught.

    Args:
        source: Directory whose contents are copied
        target: Directory receiving the contents
        keep_existing_files: Skip files that already exist at the target
        copy_dot_files: Include files and directories whose name starts with "."

    Returns:
        Number of files written

    Raises:
        FileNotFoundError: If source is not a directory
        IsADirectoryError: If a file would replace an existing directory
    """
    source_dir = Path(source)
    target_dir = Path(target)

    if not source_dir.is_dir():
        raise FileNotFoundError(f'"{source_dir}" is no valid directory')

    target_dir.mkdir(parents=True, exist_ok=True)
    written = 0

    for item in sorted(source_dir.rglob("*")):
        relative = item.relative_to(source_dir)

        if not copy_dot_files and any(part.startswith(".") for part in relative.parts):
            continue

        destination = target_dir / relative

        if item.is_dir():
            destination.mkdir(parents=True, exist_ok=True)
            continue

        if keep_existing_files and destination.exists():
            logger.debug(f"Keeping existing file: {destination}")
            continue

        if destination.is_dir():
            raise IsADirectoryError(f'Can not copy "{item}" onto directory "{destination}"')

        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(item, destination)
        written += 1

    logger.debug(f"Copied {written} file(s) from {source_dir} to {target_dir}")
    return written
