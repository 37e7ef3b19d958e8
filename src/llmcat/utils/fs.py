from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, Iterator


def walk_files(root: Path) -> Iterator[Path]:
    """
    Depth-first walk yielding every non-directory entry under root,
    siblings in name order. Symlinked directories are not descended.
    OSError from listing a directory propagates to the caller.
    """
    with os.scandir(root) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        child = root / entry.name
        if entry.is_dir(follow_symlinks=False):
            yield from walk_files(child)
        else:
            yield child


def read_paths(lines: Iterable[bytes]) -> list[str]:
    """Raw stdin lines to paths; names that are not valid UTF-8 survive via os.fsdecode."""
    paths = []
    for ln in lines:
        p = ln.strip()
        if p:
            paths.append(os.fsdecode(p))
    return paths
