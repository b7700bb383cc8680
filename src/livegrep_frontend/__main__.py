from __future__ import annotations
import argparse
import logging
import sys

from livegrep import __version__
from livegrep import config as CFG
from livegrep.engine import Engine

log = logging.getLogger("livegrep")


def _split_extensions(values: list[str] | None) -> list[str] | None:
    """-e py,md -e txt -> ["py", "md", "txt"]; None keeps the built-in set."""
    if values is None:
        return None
    out: list[str] = []
    for v in values:
        out.extend(x for x in v.split(",") if x.strip())
    return out


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="livegrep",
        description="Live regex search over the text files under a folder (Esc to quit, Enter to keep results)",
    )
    p.add_argument("-i", "--insensitive-to-case", action="store_true",
                   help="Case-insensitive matching")
    p.add_argument("-e", "--extensions", action="append", default=None, metavar="EXT[,EXT...]",
                   help="File extensions to search (replaces the built-in list)")
    p.add_argument("--root", default=CFG.DEFAULT_ROOT, help="Folder to search (default: .)")
    p.add_argument("--cache-size", type=int, default=CFG.CACHE_CAPACITY,
                   help="Number of files kept in memory")
    p.add_argument("--web", action="store_true", help="Serve the Flask live view instead of the terminal UI")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--log-file", default=None,
                   help=f"Where --verbose logs go in terminal mode (default: {CFG.DEFAULT_LOG_FILE})")
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _setup_logging(args: argparse.Namespace) -> None:
    if not (args.verbose or CFG.verbose()):
        return
    if args.web:
        # stderr is free while Flask runs
        logging.basicConfig(level=logging.INFO)
    else:
        # the terminal UI owns the screen; keep logs out of it
        logging.basicConfig(level=logging.INFO, filename=args.log_file or CFG.DEFAULT_LOG_FILE)


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if args.cache_size < 1:
        p.error("--cache-size must be at least 1")
    _setup_logging(args)

    eng = Engine()
    try:
        try:
            eng.build(
                root=args.root,
                extensions=_split_extensions(args.extensions),
                cache_capacity=args.cache_size,
                verbose=args.verbose,
            )
        except ValueError as exc:
            p.error(str(exc))

        if args.web:
            from .web import serve
            return serve(eng, host=args.host, port=args.port,
                         case_insensitive=args.insensitive_to_case, debug=args.verbose)

        from .terminal import run_interactive
        try:
            return run_interactive(eng, case_insensitive=args.insensitive_to_case)
        except RuntimeError as exc:
            print(f"livegrep: {exc}", file=sys.stderr)
            return 2
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
