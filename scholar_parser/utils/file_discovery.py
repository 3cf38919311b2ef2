"""
File discovery utilities for scholar_parser.

Provides functions to find saved result pages on disk.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def find_html_files(
    paths: list[Path],
    limit: int | None = None,
    extensions: list[str] | None = None,
) -> list[Path]:
    """
    Find saved result pages among files and directories.

    Files given explicitly are kept regardless of extension; directories
    are searched recursively.

    Args:
        paths: Files and/or directories to search
        limit: Optional limit on number of files to return
        extensions: Optional list of extensions to search (default: ['.html', '.htm'])

    Returns:
        Sorted, de-duplicated list of file paths
    """
    if extensions is None:
        extensions = [".html", ".htm"]

    files: set[Path] = set()
    for path in paths:
        if path.is_file():
            files.add(path)
        elif path.is_dir():
            for ext in extensions:
                files.update(p for p in path.glob(f"**/*{ext}") if p.is_file())
        else:
            logger.warning(f"⚠ No such file or directory: {path}")

    result = sorted(files)
    if limit:
        result = result[:limit]
    return result
