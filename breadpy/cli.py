"""Command line entrypoint: lint files, plan/run builds, or serve LSP over stdio."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

from breadpy import __version__
from breadpy.build import BuildError, execute_build, plan_build
from breadpy.diagnostics import format_diagnostic
from breadpy.document import FILE_EXTENSION, TextDocument, is_bread_document
from breadpy.pipeline import run_lint

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="breadpy", description=__doc__)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="lint .bread files")
    check.add_argument("paths", nargs="+", type=Path)

    build = commands.add_parser("build", help="compile a .bread file with breadlang")
    build.add_argument("path", type=Path)
    build.add_argument("--run", action="store_true", help="run the program after building")
    build.add_argument("--workspace", type=Path, default=Path.cwd(), help="workspace root (default: cwd)")
    build.add_argument("--dry-run", action="store_true", help="print the command without running it")

    commands.add_parser("serve", help="run the language server on stdio")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "check":
        return _check(args.paths)
    if args.command == "build":
        return _build(args.path, args.workspace, run=args.run, dry_run=args.dry_run)

    from breadpy.server import main as serve

    serve()
    return 0


def _check(paths: Sequence[Path]) -> int:
    """Lint each `.bread` path; 1 when a file has errors, 2 when a file cannot be read."""
    status = 0
    for path in paths:
        if not is_bread_document(str(path)):
            print(f"Skipping {path}: not a {FILE_EXTENSION} file", file=sys.stderr)
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to read %s", path, exc_info=True)
            print(f"Cannot read {path}: {_reason(exc)}", file=sys.stderr)
            status = 2
            continue
        result = run_lint(TextDocument(uri=str(path), text=text))
        for diagnostic in result.diagnostics:
            print(format_diagnostic(diagnostic, source=str(path)))
        if result.has_errors:
            status = max(status, 1)
    return status


def _reason(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def _build(path: Path, workspace: Path, *, run: bool, dry_run: bool) -> int:
    try:
        plan = plan_build(path, workspace, run=run)
    except BuildError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        return 2
    print(plan.description)
    print(f"Executing: {plan.command}")
    if dry_run:
        return 0
    return execute_build(plan, workspace)
