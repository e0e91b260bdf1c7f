"""Mapping of libraries and containers to page paths and output files."""

import re
from pathlib import Path

# Keep letters, digits, underscore, dash. Dots become hyphens.
PATH_SAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")


def path_safe(name: str) -> str:
    """Make a stable filename-ish token out of a library or type name.

    Dots in library names become hyphens and generic arguments are dropped.
    """
    name = re.sub(r"<.*>", "", name)
    name = PATH_SAFE_RE.sub("-", name.replace(".", "-")).strip("-")
    return name or "Unknown"


def page_path_for(api_root: str, *names: str) -> str:
    """Generate the page path for a library (and optionally a container in it)."""
    # shapes.core, Circle -> /api/shapes-core/Circle
    return "/".join([api_root.rstrip("/"), *(path_safe(n) for n in names)])


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Determine the output file for a page path, creating its folder."""
    # /api/shapes-core -> out_root/api/shapes-core.md
    p = out_root / (page_path.split("#", 1)[0].lstrip("/") + ".md")
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
