#!/usr/bin/env python3
"""Command-line interface for toyparse."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .errors import ParseError
from .parser import parse_css, parse_html
from .serialize import to_css, to_html


def _get_version() -> str:
    try:
        return version("toyparse")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="toyparse",
        description="Parse an HTML document or a CSS stylesheet and print it back.",
        epilog=(
            "Examples:\n"
            "  toyparse page.html --pretty\n"
            "  toyparse page.html --format text\n"
            "  toyparse style.css\n"
            "  cat style.css | toyparse --css -\n"
            "\n"
            "If you don't have the 'toyparse' command available, use:\n"
            "  python -m toyparse ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="File to parse, or '-' to read from stdin",
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--css",
        action="store_const",
        const="css",
        dest="mode",
        help="Parse the input as CSS (default for *.css files)",
    )
    mode_group.add_argument(
        "--html",
        action="store_const",
        const="html",
        dest="mode",
        help="Parse the input as HTML (default otherwise)",
    )
    parser.add_argument(
        "--format",
        choices=["html", "text", "css"],
        help="Output format (default: html for documents, css for stylesheets)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser progress to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"toyparse {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    if args.mode is None:
        args.mode = "css" if args.path.lower().endswith(".css") else "html"
    if args.format is None:
        args.format = args.mode
    if (args.mode == "css") != (args.format == "css"):
        parser.error(f"--format {args.format} is not available for {args.mode} input")

    return args


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    return Path(path).read_text(encoding="utf-8")


def _render(args: argparse.Namespace, source: str) -> str:
    if args.mode == "css":
        return to_css(parse_css(source), pretty=args.pretty)

    root = parse_html(source)
    if args.format == "text":
        return root.to_text()
    return to_html(root, pretty=args.pretty)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    source = _read_source(args.path)

    try:
        output = _render(args, source)
    except ParseError as e:
        print(
            f"error: {e.code} at offset {e.position} (line {e.line}, column {e.column}): {e.message}",
            file=sys.stderr,
        )
        raise SystemExit(2) from e

    sys.stdout.write(output)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
