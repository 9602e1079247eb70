"""Command-line entry point: check a schema file and print its diagnostics."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from schemadiag.checks import check_schema
from schemadiag.diagnostics.errors import RenderError
from schemadiag.highlight.classifier import build_classifier
from schemadiag.render.backends import AnsiBackend, OutputBackend, PlainTextBackend, format_views
from schemadiag.render.renderer import Renderer


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="schemadiag", description="Check a schema file and show diagnostics")
    ap.add_argument("path", type=Path, help="Schema source file")
    ap.add_argument("--theme", type=Path, default=None, help="YAML highlighting theme")
    ap.add_argument("--no-color", action="store_true", help="Print plain text without colors")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        source = args.path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"schemadiag: cannot read {args.path}: {e}", file=sys.stderr)
        return 2

    report = check_schema(source)

    backend: OutputBackend
    if args.no_color:
        backend = PlainTextBackend()
        renderer = Renderer()
    else:
        backend = AnsiBackend()
        renderer = Renderer(build_classifier(args.theme))

    try:
        views = renderer.render(report, source)
    except RenderError as e:
        print(f"schemadiag: {e}", file=sys.stderr)
        return 2

    if views:
        print(format_views(views, backend))
    return 1 if report.is_error() else 0


if __name__ == "__main__":
    sys.exit(main())
