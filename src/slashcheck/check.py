"""CLI for checking a built site for links missing a trailing slash."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from .config import CheckerConfig, load_config
from .files import scan_site
from .links import find_bad_links, read_html
from .report import BadFileReport, CheckResult, exit_code, format_invalid_link, render_summary

EXIT_FATAL = 2


def _silent(_: str) -> None:
    return None


def run_check(
    config: CheckerConfig,
    *,
    emit: Callable[[str], None] = print,
) -> CheckResult:
    """Scan ``config.root_dir`` and collect every file with bad links.

    Progress lines go through ``emit``. Any OSError while listing or reading
    files aborts the run.
    """
    root = Path(config.root_dir)
    site = scan_site(root, excluded_path_substring=config.excluded_path_substring)
    emit("")
    emit(f"Found {len(site.files_to_check)} files to check in {root}")

    bad_files: list[BadFileReport] = []
    for record in site.files_to_check:
        emit(f"  Checking {record.relative}")
        links = find_bad_links(record, read_html(record), site.known_paths, config)
        if links:
            for link in links:
                emit(format_invalid_link(link))
            bad_files.append(BadFileReport(file=record, links=tuple(links)))

    return CheckResult(
        root_dir=root,
        files_checked=len(site.files_to_check),
        bad_files=tuple(bad_files),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description=(
            "Find internal links in built .html files that lack a trailing slash "
            "and would be redirected by the static host."
        )
    )
    p.add_argument("--config", default=None, help="Optional YAML config file.")
    p.add_argument(
        "--root_dir",
        default=None,
        help="Built site directory to scan (default: dist).",
    )
    p.add_argument(
        "--base_url",
        default=None,
        help="Canonical site URL stripped from absolute links before checking.",
    )
    p.add_argument(
        "--exclude",
        dest="excluded_path_substring",
        default=None,
        help="Skip .html files whose path below the root contains this substring.",
    )
    p.add_argument(
        "--ignore_case",
        action="store_true",
        default=None,
        help="Match a/area/base/link tag names case-insensitively.",
    )
    p.add_argument("--quiet", action="store_true", help="Do not print per-file progress.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    overrides = {
        "root_dir": args.root_dir,
        "base_url": args.base_url,
        "excluded_path_substring": args.excluded_path_substring,
        "ignore_case": args.ignore_case,
    }
    try:
        config = load_config(
            Path(args.config) if args.config else None,
            overrides=overrides,
        )
        print("\nChecking for missing trailing slashes")
        result = run_check(config, emit=_silent if args.quiet else print)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    print("")
    print(render_summary(result))
    return exit_code(result)


if __name__ == "__main__":
    raise SystemExit(main())
