"""Command line: ``coda check``, ``coda format`` and ``coda html``."""

from __future__ import annotations

import argparse
import logging
import sys

from coda.models.export_config import ExportConfig
from coda.svg.errors import DocumentError
from coda.svg.html import save_html
from coda.svg.parser import load
from coda.svg.serializer import export, save


def _report(path: str, err: DocumentError) -> None:
    print(f"{path}:{err.line}:{err.column}: {err.operation}: {err.message}", file=sys.stderr)
    for operation, message in err.trace:
        print(f"  in {operation}: {message}", file=sys.stderr)


def _check(args: argparse.Namespace) -> int:
    document = load(args.file)
    print(f"{args.file}: ok ({sum(1 for _ in document.walk())} shapes)")
    return 0


def _format(args: argparse.Namespace) -> int:
    document = load(args.file)
    config = ExportConfig(tab_size=args.tab_size, line_break=not args.single_line)
    if args.output:
        save(document, args.output, config)
    else:
        export(document, sys.stdout, config)
    return 0


def _html(args: argparse.Namespace) -> int:
    save_html(load(args.file), args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coda", description="Coda vector document tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser activity")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Parse a document and report the first error")
    check.add_argument("file")
    check.set_defaults(func=_check)

    fmt = sub.add_parser("format", help="Re-serialize a document")
    fmt.add_argument("file")
    fmt.add_argument("-o", "--output", help="Output file (default: stdout)")
    fmt.add_argument("--tab-size", type=int, default=4, help="Spaces per indentation level")
    fmt.add_argument("--single-line", action="store_true", help="Keep each shape's attributes on one line")
    fmt.set_defaults(func=_format)

    html = sub.add_parser("html", help="Export a document as an HTML page")
    html.add_argument("file")
    html.add_argument("-o", "--output", required=True, help="Output .html file")
    html.set_defaults(func=_html)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "format" and args.tab_size <= 0:
        parser.error("--tab-size must be positive")

    try:
        return args.func(args)
    except DocumentError as err:
        _report(args.file, err)
        return 1


if __name__ == "__main__":
    sys.exit(main())
