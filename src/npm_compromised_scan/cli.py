"""Command line interface.

Compare an npm dependency tree (``npm ls --all --json``) to a list of
compromised packages.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import config
from .core import scan
from .errors import ScanError
from .report import ScanReport
from .summary import render_markdown, render_text
from .validators.report_schema import validate_report
from .walker import DEFAULT_MAX_DEPTH


def _fail_exit_code(value: str) -> int:
    try:
        code = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid exit code: {value!r}") from exc
    if code in (0, config.ERROR_EXIT_CODE):
        raise argparse.ArgumentTypeError(
            f"exit code must differ from 0 and {config.ERROR_EXIT_CODE}"
        )
    return code


def _max_depth(value: str) -> int:
    try:
        return config.parse_max_depth(value)
    except ScanError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None, settings: config.Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="npm-compromised-scan", description=__doc__)
    parser.add_argument(
        "-l",
        "--list",
        dest="list_path",
        default=settings.list_path,
        help="Path to compromised list file, or '-' for stdin (default: %(default)s)",
    )
    parser.add_argument(
        "--npm-json",
        default=None,
        help="Existing npm ls JSON file, or '-' for stdin. If omitted, runs `npm ls --all --json`.",
    )
    parser.add_argument("-f", "--format", choices=["text", "json"], default="text")
    parser.add_argument(
        "--fail-exit-code",
        type=_fail_exit_code,
        default=config.DEFAULT_FAIL_EXIT_CODE,
        help="Exit code to use when any matches are found (default: %(default)s)",
    )
    parser.add_argument(
        "--no-run-npm",
        action="store_true",
        help="Do not run npm (error if no --npm-json source is provided)",
    )
    parser.add_argument(
        "--max-depth",
        type=_max_depth,
        default=None,
        help=(
            f"Maximum dependency nesting depth (default: ${config.MAX_DEPTH_ENV_VAR} "
            f"or {DEFAULT_MAX_DEPTH})"
        ),
    )
    parser.add_argument(
        "--warn-only",
        action="store_true",
        default=settings.warn_only,
        help="Exit 0 even when matches are found",
    )
    args = parser.parse_args(argv)
    if args.list_path == "-" and args.npm_json == "-":
        parser.error("--list and --npm-json cannot both read from stdin")
    return args


def _render(report: ScanReport, fmt: str) -> str:
    if fmt == "json":
        document = report.to_dict()
        validate_report(document)
        return json.dumps(document, indent=2) + "\n"
    return render_text(report)


def _write_step_summary(report: ScanReport, path: str) -> None:
    try:
        with Path(path).open("a", encoding="utf-8") as fh:
            fh.write(render_markdown(report))
    except OSError as exc:
        print(f"Warning: could not write step summary to {path}: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    settings = config.load_settings()
    args = parse_args(argv, settings)

    try:
        max_depth = settings.max_depth if args.max_depth is None else args.max_depth
        report = scan(
            args.list_path,
            npm_json=args.npm_json,
            run_npm=not args.no_run_npm,
            max_depth=max_depth,
        )
        output = _render(report, args.format)
    except ScanError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return config.ERROR_EXIT_CODE

    sys.stdout.write(output)

    if settings.step_summary_path:
        _write_step_summary(report, settings.step_summary_path)

    if report.has_matches and not args.warn_only:
        return args.fail_exit_code
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
