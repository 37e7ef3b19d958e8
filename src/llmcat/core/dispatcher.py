from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator

from llmcat.core.emitter import emit_file
from llmcat.core.filters import matches_extension
from llmcat.core.schemas import CatConfig, PathResult
from llmcat.utils.fs import walk_files


def process_path(path: str, config: CatConfig, out: BinaryIO) -> Iterator[PathResult]:
    """
    Route one input path: stat it, then emit it as a file, walk it as a
    directory (with -r), or report why it was rejected.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        yield PathResult(path=path, outcome="access_error", detail=str(e))
        return

    if not stat.S_ISDIR(st.st_mode):
        if matches_extension(path, config.extension):
            yield emit_file(path, config, out)
        return

    if not config.recurse:
        yield PathResult(
            path=path,
            outcome="is_directory",
            detail=f"'{path}' is a directory (use -r to recurse)",
        )
        return

    # a listing error ends this walk; results already yielded stand
    try:
        for fp in walk_files(Path(path)):
            p = str(fp)
            if matches_extension(p, config.extension):
                yield emit_file(p, config, out)
    except BrokenPipeError:
        raise
    except OSError as e:
        yield PathResult(path=path, outcome="walk_error", detail=str(e))


def process_paths(paths: Iterable[str], config: CatConfig, out: BinaryIO) -> Iterator[PathResult]:
    for p in paths:
        yield from process_path(p, config, out)
