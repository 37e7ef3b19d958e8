from __future__ import annotations

import os
import shutil
from typing import BinaryIO

from llmcat.core.schemas import CatConfig, PathResult
from llmcat.core.sniff import is_binary, read_sample


def delimiter(path: str) -> bytes:
    return b"\n--- " + os.fsencode(path) + b" ---\n"


def emit_file(path: str, config: CatConfig, out: BinaryIO) -> PathResult:
    """
    Write one file to `out` as: blank line, `--- <path> ---`, raw bytes, newline.

    Names-only mode writes the bare path and never opens the file.
    Oversized and binary files are skipped before anything is written.
    """
    if config.names_only:
        out.write(os.fsencode(path) + b"\n")
        return PathResult(path=path, outcome="listed")

    try:
        size = os.stat(path).st_size
    except OSError as e:
        return PathResult(path=path, outcome="access_error", detail=str(e))

    if config.max_size > 0 and size > config.max_size:
        return PathResult(
            path=path,
            outcome="too_large",
            detail=f"size {size} bytes exceeds limit {config.max_size}",
            size=size,
        )

    try:
        with open(path, "rb") as fh:
            sample = read_sample(fh)
            if is_binary(sample):
                return PathResult(path=path, outcome="binary", size=size)
            fh.seek(0)

            out.write(delimiter(path))
            shutil.copyfileobj(fh, out)
            out.write(b"\n")
    except BrokenPipeError:
        # reader went away; not a per-file failure
        raise
    except OSError as e:
        return PathResult(path=path, outcome="io_error", detail=str(e), size=size)

    return PathResult(path=path, outcome="emitted", size=size)
