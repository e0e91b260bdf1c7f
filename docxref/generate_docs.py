"""Generate Markdown API pages with linked comment references from symbol files.

Each symbol file describes one library. Every ``[reference]`` in a comment is
resolved against the scopes and members visible from where the comment is
written and rewritten into a Markdown link.
"""

import argparse
import logging
from pathlib import Path

from docxref.errors import SymbolFileError
from docxref.run_generation import run_generation


def main() -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description="Generate Markdown API pages from library symbol files."
    )
    ap.add_argument(
        "symbols_dir",
        type=Path,
        help="Directory containing the *.yml symbol files, one per library",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated Markdown pages",
    )
    ap.add_argument(
        "--api-root",
        default=None,
        help="Wiki path root for generated pages (default: /api)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--home-page",
        action="store_true",
        help="Generate a simple Home page (home.md)",
    )
    ap.add_argument(
        "--report",
        default=None,
        help="Write the unresolved reference report to this JSON file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve every reference and write only the report",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug records",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run_generation(args)
    except SymbolFileError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    raise SystemExit(main())
