"""Rendering of library landing pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.markdown import md_link
from docxref.render_member import render_member

if TYPE_CHECKING:
    from docxref.container import Container
    from docxref.library import Library
    from docxref.member import Member
    from docxref.rewrite_comment_references import CommentLinker


def _render_container_list(
    title: str,
    containers: list[Container],
    linker: CommentLinker,
) -> list[str]:
    """Render linked container headings, each followed by its summary."""
    containers = [c for c in containers if c.is_public]
    if not containers:
        return []
    parts = [f"## {title}", ""]
    for c in containers:
        parts.append(f"### {md_link(c.name, c.href or '#')}")
        summ = linker.link(c.summary, c).replace("\n", " ").strip()
        if summ:
            parts.append(summ)
        parts.append("")
    return parts


def _render_top_level_members(
    title: str,
    members: list[Member],
    linker: CommentLinker,
    code_language: str,
) -> list[str]:
    members = [m for m in members if m.is_public]
    if not members:
        return []
    parts = [f"## {title}", ""]
    for m in members:
        parts.extend(render_member(m, linker, code_language=code_language))
    return parts


def render_library_page(
    library: Library,
    linker: CommentLinker,
    *,
    code_language: str = "dart",
) -> str:
    """Render a library landing page in Markdown."""
    parts: list[str] = [f"# Library {library.name}", ""]

    summary = linker.link(library.summary, library)
    if summary:
        parts += [summary, ""]

    parts.extend(_render_container_list("Classes", library.classes, linker))
    parts.extend(_render_container_list("Mixins", library.mixins, linker))
    parts.extend(_render_container_list("Enums", library.enums, linker))
    parts.extend(_render_container_list("Extensions", library.extensions, linker))
    parts.extend(
        _render_top_level_members("Properties", library.properties, linker, code_language)
    )
    parts.extend(
        _render_top_level_members("Functions", library.functions, linker, code_language)
    )

    return "\n".join(parts).rstrip() + "\n"
