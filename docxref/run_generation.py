"""Orchestration logic for generating Markdown pages out of symbol files."""

import argparse
import logging
from pathlib import Path
from typing import Any

from docxref.build_package_graph import build_package_graph
from docxref.library import Library
from docxref.load_config import compute_config_hash, load_config
from docxref.page_paths import output_file_for_page
from docxref.package_graph import PackageGraph
from docxref.reference_report import ReferenceReport
from docxref.render_container_page import render_container_page
from docxref.render_library_page import render_library_page
from docxref.rewrite_comment_references import CommentLinker

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    symbol_files = sorted(
        [*args.symbols_dir.rglob("*.yml"), *args.symbols_dir.rglob("*.yaml")]
    )
    if not symbol_files:
        msg = f"No .yml files found under: {args.symbols_dir}"
        raise SystemExit(msg)

    config = _init_config(args)
    graph = build_package_graph(symbol_files, config)
    logger.info(
        "Loaded %s libraries from %s symbol files", len(graph.libraries), len(symbol_files)
    )

    references = config["references"]
    report = ReferenceReport(compute_config_hash(config), references.get("ignore"))
    linker = CommentLinker(
        include_private=graph.include_private,
        report=report if references.get("report_unresolved", True) else None,
    )

    pages = _render_all_pages(graph, linker, config)

    report_path = args.report or ("reference_report.json" if args.dry_run else None)
    if report_path:
        report.generate_report(report_path)

    if args.dry_run:
        print(
            f"Dry run complete. {report.resolved} references resolved, "
            f"{len(report.unresolved)} unresolved. Report generated at {report_path}"
        )
        return 0

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    for page_path, md in pages.items():
        output_file_for_page(out_root, page_path).write_text(md, encoding="utf-8")

    if config["output"].get("home_page"):
        _write_home_page(out_root, graph.libraries)

    print(f"Generated {len(pages)} Markdown pages into: {out_root}")
    if report.unresolved:
        print(f"{len(report.unresolved)} comment references could not be resolved.")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.api_root:
        config["output"]["api_root"] = args.api_root
    if args.home_page:
        config["output"]["home_page"] = True
    return config


def _render_all_pages(
    graph: PackageGraph, linker: CommentLinker, config: dict[str, Any]
) -> dict[str, str]:
    """Render every public library and container page, keyed by page path."""
    code_language = config["output"].get("code_language", "dart")
    pages: dict[str, str] = {}
    for library in graph.libraries:
        if not library.is_public:
            continue
        pages[library.href] = render_library_page(
            library, linker, code_language=code_language
        )
        containers = [
            *library.classes,
            *library.mixins,
            *library.enums,
            *library.extensions,
        ]
        for container in containers:
            if not container.is_public:
                continue
            pages[container.href] = render_container_page(
                container, linker, code_language=code_language
            )
    return pages


def _write_home_page(out_root: Path, libraries: list[Library]) -> None:
    """Generate a home page listing every public library."""
    home = ["# Home", "", "## Libraries", ""]
    home.extend(
        f"- [{lib.name}]({lib.href})" for lib in libraries if lib.is_public
    )
    home.append("")
    (out_root / "home.md").write_text("\n".join(home), encoding="utf-8")
