from __future__ import annotations

import argparse
import os
import sys
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.markup import escape

from llmcat.core.dispatcher import process_paths
from llmcat.core.schemas import DEFAULT_MAX_SIZE, CatConfig, PathResult
from llmcat.utils.fs import read_paths

try:
    VERSION = version("llm-cat")
except PackageNotFoundError:
    # running from a source tree without an install
    VERSION = "unknown"

err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

EPILOG = """\
Usage:
  llm-cat [flags] [files...]
  command | xargs llm-cat [flags]
  find . -name '*.go' | llm-cat

Examples:
  llm-cat file1.txt file2.go
  llm-cat -r -ext .go src/
  llm-cat -n $(git ls-files)
  find . -type f -size -20M | llm-cat

Output format when dumping:
  --- filename.go ---
  [file contents]
"""


def non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid byte count: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="llm-cat",
        description="Display files in an LLM-friendly format",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("paths", nargs="*", help="Files or directories (read from stdin when omitted)")
    ap.add_argument("-r", "--recursive", action="store_true", dest="recurse", help="Recursively process directories")
    ap.add_argument("-ext", "--ext", default="", dest="extension", metavar="STRING",
                    help="Only process files with this extension (e.g., .go, .txt)")
    ap.add_argument("-n", "--names-only", action="store_true", dest="names_only",
                    help="Only print file names, not their contents")
    ap.add_argument("-max-size", "--max-size", type=non_negative_int, default=DEFAULT_MAX_SIZE,
                    dest="max_size", metavar="BYTES",
                    help=f"Maximum bytes per file (default {DEFAULT_MAX_SIZE}, 0 = unlimited)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return ap


def report(result: PathResult) -> None:
    path = escape(result.path)
    if result.outcome == "too_large":
        err_console.print(f"[yellow]Skipping {path} ({escape(result.detail)})[/yellow]")
    elif result.outcome == "binary":
        err_console.print(f"[yellow]Skipping binary file {path}[/yellow]")
    elif result.failed:
        err_console.print(f"[red]Error processing {path}: {escape(result.detail)}[/red]")


def run(paths: list[str], config: CatConfig) -> None:
    out = sys.stdout.buffer
    for result in process_paths(paths, config, out):
        out.flush()
        if not result.ok:
            report(result)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = CatConfig(
        recurse=args.recurse,
        extension=args.extension,
        names_only=args.names_only,
        max_size=args.max_size,
    )

    paths = list(args.paths)
    if not paths:
        try:
            paths = read_paths(sys.stdin.buffer)
        except OSError as e:
            err_console.print(f"[red]Error reading stdin: {escape(str(e))}[/red]")
            return 1

    try:
        run(paths, config)
    except BrokenPipeError:
        # downstream closed early (e.g. `| head`); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0

    # per-path failures are reported but do not change the exit code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
