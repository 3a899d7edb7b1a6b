"""
Filesystem helpers for merging a backed-up directory into a fresh clone.
"""

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def merge_directories(source: Path, target: Path) -> int:
    """
    Move every entry of ``source`` into ``target``, overwriting on conflict.

    Hidden entries are included. When both sides hold a directory of the
    same name the two are merged recursively; any other conflict is
    resolved in favour of ``source``. ``source`` is left empty but is not
    removed.

    Args:
        source: Directory whose contents are moved.
        target: Directory receiving the contents.

    Returns:
        Number of top-level entries moved out of ``source``.
    """
    source = Path(source)
    target = Path(target)
    moved = 0

    for entry in sorted(os.listdir(source)):
        src = source / entry
        dst = target / entry

        if src.is_dir() and not src.is_symlink() and dst.is_dir() and not dst.is_symlink():
            merge_directories(src, dst)
            src.rmdir()
        else:
            if dst.is_symlink() or dst.is_file():
                dst.unlink()
            elif dst.is_dir():
                shutil.rmtree(dst)
            shutil.move(str(src), str(dst))

        logger.debug(f"Moved {src} -> {dst}")
        moved += 1

    return moved


def remove_empty_directory(path: Path) -> None:
    """
    Remove ``path``, failing if anything is still inside it.

    A symlink is unlinked rather than followed.
    """
    path = Path(path)
    if path.is_symlink():
        path.unlink()
    else:
        path.rmdir()
    logger.debug(f"Removed directory: {path}")
