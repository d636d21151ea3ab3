"""Result types and text rendering for a link check run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .files import FileRecord
from .links import LinkFinding

REMEDIATION = """To Fix:
1. Find the source .md or .html files - this script is run on the built .html files
2. Search in the source file for the problem links
3. Add a trailing slash, or reference the file directly.

For example, for '/blog', use either '/blog/' or '/blog/index.html'."""


@dataclass(frozen=True)
class BadFileReport:
    file: FileRecord
    links: tuple[LinkFinding, ...]


@dataclass(frozen=True)
class CheckResult:
    root_dir: Path
    files_checked: int
    bad_files: tuple[BadFileReport, ...]

    @property
    def ok(self) -> bool:
        return not self.bad_files

    @property
    def bad_link_count(self) -> int:
        return sum(len(b.links) for b in self.bad_files)


def format_invalid_link(finding: LinkFinding) -> str:
    return f"    └─ Invalid link: {finding.original}"


def render_summary(result: CheckResult) -> str:
    if result.ok:
        return "No problems found!"

    lines = ["Problems found!", ""]
    for idx, bad in enumerate(result.bad_files, start=1):
        lines.append(f"{idx}. {bad.file.relative}")
        lines.extend(format_invalid_link(link) for link in bad.links)
    lines.append("")
    lines.append(
        f"Found {len(result.bad_files)} files with {result.bad_link_count} bad links."
    )
    lines.append("")
    lines.append(REMEDIATION)
    return "\n".join(lines)


def exit_code(result: CheckResult) -> int:
    return 0 if result.ok else 1
