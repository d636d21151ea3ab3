"""Extract, normalize, and classify href values from built HTML.

A link is "bad" when it points at an internal, extensionless path without a
trailing slash that is not known to map onto an existing ``<path>.html``. The
static host answers such a request with a redirect to the directory form on a
different canonical host, e.g.::

    /blog -> /blog.html (missing) -> 301 https://<pages-host>/blog/

``/blog/`` or ``/blog/index.html`` avoid the redirect.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from typing import Iterable

from .config import CheckerConfig
from .files import FileRecord

LINK_PATTERN = r'<(?:a|area|base|link)[^>]*href\s*=\s*"([^"]+)"'
LINK_RE = re.compile(LINK_PATTERN)
LINK_RE_IGNORECASE = re.compile(LINK_PATTERN, re.IGNORECASE)

FILE_EXT_RE = re.compile(r"/[^/]+\.[a-z]+$")
NON_HTTP_SCHEMES = ("mailto:", "tel:")


@dataclass(frozen=True)
class LinkFinding:
    original: str
    normalized: str


def read_html(record: FileRecord) -> str:
    return record.path.read_text(encoding="utf-8", errors="replace")


def extract_hrefs(contents: str, *, ignore_case: bool = False) -> list[str]:
    """Return href values of a/area/base/link tags in document order, duplicates kept."""
    pattern = LINK_RE_IGNORECASE if ignore_case else LINK_RE
    return [m.group(1) for m in pattern.finditer(contents)]


def normalize_link(href: str, base: str, *, base_url: str = "") -> LinkFinding:
    """Reduce ``href`` to a root-relative path where possible.

    ``base`` is the root-relative directory of the page containing the link.
    Fragments go first, then the canonical ``base_url`` prefix, then relative
    paths are resolved lexically against ``base``. A trailing slash on a
    relative href survives resolution, so ``../bar/`` becomes ``/guides/bar/``
    rather than the redirect-prone ``/guides/bar``.
    """
    prepped = href.split("#", 1)[0]
    if base_url:
        prepped = prepped.replace(base_url, "", 1)
    if prepped and not prepped.startswith("/") and ":" not in prepped:
        resolved = posixpath.normpath(posixpath.join(base, prepped))
        if prepped.endswith("/") and not resolved.endswith("/"):
            resolved += "/"
        prepped = resolved
    return LinkFinding(original=href, normalized=prepped)


def is_bad_link(finding: LinkFinding, known_paths: frozenset[str]) -> bool:
    link = finding.normalized
    if link == "":
        return False
    if FILE_EXT_RE.search(link):
        return False
    if link.endswith("/"):
        return False
    if "://" in link:
        return False
    if any(scheme in link for scheme in NON_HTTP_SCHEMES):
        return False
    # Extensionless link whose .html page exists is served directly by the origin.
    if f"{link}.html" in known_paths:
        return False
    return True


def filter_bad_links(
    findings: Iterable[LinkFinding], known_paths: frozenset[str]
) -> list[LinkFinding]:
    return [f for f in findings if is_bad_link(f, known_paths)]


def find_bad_links(
    record: FileRecord,
    contents: str,
    known_paths: frozenset[str],
    config: CheckerConfig,
) -> list[LinkFinding]:
    base = posixpath.dirname(record.relative)
    findings = (
        normalize_link(href, base, base_url=config.base_url)
        for href in extract_hrefs(contents, ignore_case=config.ignore_case)
    )
    return filter_bad_links(findings, known_paths)
