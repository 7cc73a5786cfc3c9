"""
CLI entry point — format a snippet or selected regions of a Java file.
"""

import argparse
import json
import sys

from .config import Config
from .editing.ranges import Range
from .engine.registry import load_engine
from .errors import FormatterError, InvalidArgument
from .host import (
    F_INCLUDE_COMMENTS, K_CLASS_BODY_DECLARATIONS, K_COMPILATION_UNIT,
    K_EXPRESSION, K_STATEMENTS, HostFormatter,
)
from .logs import setup_logger

_KIND_CHOICES = {
    "expression": K_EXPRESSION,
    "statements": K_STATEMENTS,
    "members": K_CLASS_BODY_DECLARATIONS,
    "program": K_COMPILATION_UNIT,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippet-format",
        description="Format a Java snippet, touching whitespace only",
    )
    parser.add_argument("path", help="File to read the snippet from, or - for stdin")
    parser.add_argument("--kind", choices=sorted(_KIND_CHOICES), default="program",
                        help="What kind of snippet the input is (default: program)")
    parser.add_argument("--offset", type=int, action="append", default=[],
                        help="Start of a region to format (repeatable)")
    parser.add_argument("--length", type=int, action="append", default=[],
                        help="Length of the region started by the matching --offset")
    parser.add_argument("--indent", type=int, default=0,
                        help="Indentation level of the snippet (default: 0)")
    parser.add_argument("--include-comments", action="store_true",
                        help="Format comments too (program snippets only)")
    parser.add_argument("--config", default=None,
                        help="Path to .snippetfmt.yaml config file")
    parser.add_argument("--apply", action="store_true",
                        help="Print the formatted text instead of the edits")
    parser.add_argument("--verbose", action="store_true",
                        help="Also log to stderr")
    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if len(args.offset) != len(args.length):
        parser.error("every --offset needs a matching --length")

    cfg = Config.load(args.config)
    setup_logger(cfg.LOG_DIR, cfg.LOG_LEVEL, verbose=args.verbose)

    try:
        source = _read_source(args.path)
    except OSError as exc:
        parser.error(f"cannot read {args.path}: {exc}")

    try:
        if args.offset:
            regions = [Range.from_offset(o, n) for o, n in zip(args.offset, args.length)]
        else:
            regions = [Range(0, len(source))]
        host = HostFormatter(load_engine(cfg))
    except (InvalidArgument, FormatterError) as exc:
        parser.error(str(exc))

    kind = _KIND_CHOICES[args.kind]
    if args.include_comments:
        kind |= F_INCLUDE_COMMENTS

    edit = host.format_regions(kind, source, regions, args.indent)

    if args.apply:
        sys.stdout.write(edit.apply(source) if edit else source)
    else:
        print(json.dumps(edit.to_dicts() if edit else [], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
