"""Command line: inspect and dry-run the @bind rewrite.

Usage:
    bindhook transform path/to/myComponent.js
    bindhook transform --check path/to/myComponent.js
    bindhook scan force-app/main/default/lwc [--plain]

Nothing on disk is modified; deploy-time rewriting happens through
BindDecoratorHook.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from bindhook import __version__
from bindhook.application.discovery.bundles import discover_bundles
from bindhook.application.reporters.console import ConsoleConfig, ConsoleReporter
from bindhook.application.reporters.plain_text import PlainTextReporter
from bindhook.application.services.transformer import BindTransformer
from bindhook.domain.exceptions.base import BindHookError
from bindhook.domain.model.cycle_report import CycleReport, SkippedComponent
from bindhook.infrastructure.adapters.file_store import LocalFileStore

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bindhook.domain.ports.reporter import ReporterProtocol

EXIT_OK = 0
EXIT_WOULD_REWRITE = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bindhook",
        description="Rewrite LWC @bind field decorators into plain JavaScript.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    transform = sub.add_parser("transform", help="Print the rewritten source of one file")
    transform.add_argument("file", type=Path, help="JavaScript file to transform")
    transform.add_argument(
        "--check",
        action="store_true",
        help="Print nothing; exit 1 if the file would be rewritten",
    )

    scan = sub.add_parser("scan", help="Report which bundles would be rewritten")
    scan.add_argument("root", type=Path, help="Directory holding LWC bundles")
    scan.add_argument("--plain", action="store_true", help="Plain text instead of rich output")

    return parser


def _run_transform(args: argparse.Namespace) -> int:
    store = LocalFileStore()
    result = BindTransformer().transform(store.read_text(args.file), args.file)

    if args.check:
        return EXIT_WOULD_REWRITE if result.modified else EXIT_OK

    sys.stdout.write(result.text)
    return EXIT_OK


def _run_scan(args: argparse.Namespace) -> int:
    store = LocalFileStore()
    transformer = BindTransformer()

    would_rewrite: list[Path] = []
    failing: list[SkippedComponent] = []
    for bundle in discover_bundles(args.root):
        path = bundle.script_path()
        try:
            result = transformer.transform(store.read_text(path), path)
        except BindHookError as exc:
            failing.append(SkippedComponent(path=path, reason=str(exc)))
            continue
        if result.modified:
            would_rewrite.append(path)

    report = CycleReport(rewritten=tuple(would_rewrite), skipped=tuple(failing))
    reporter: ReporterProtocol
    if args.plain:
        reporter = PlainTextReporter(title="bindhook scan")
    else:
        reporter = ConsoleReporter(ConsoleConfig(title="BIND DECORATOR SCAN"))
    sys.stdout.write(reporter.report(report))

    return EXIT_ERROR if failing else EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "transform":
            return _run_transform(args)
        return _run_scan(args)
    except (BindHookError, OSError, ValueError) as exc:
        print(f"bindhook: {exc}", file=sys.stderr)
        return EXIT_ERROR
