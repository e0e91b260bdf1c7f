"""Rendering of member sections shared by library and container pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.accessor import Property
from docxref.markdown import md_code, md_codeblock, md_table

if TYPE_CHECKING:
    from docxref.member import Member
    from docxref.rewrite_comment_references import CommentLinker


def _render_member_params(member: Member, linker: CommentLinker) -> list[str]:
    """Render member parameters table."""
    rows: list[list[str]] = []
    for p in member.parameters:
        pdesc = linker.link(p.summary, p).replace("\n", " ")
        rows.append([md_code(p.name), md_code(p.type) if p.type else "", pdesc])
    if not rows:
        return []
    return ["#### Parameters", "", md_table(["Name", "Type", "Description"], rows), ""]


def _render_member_returns(member: Member) -> list[str]:
    """Render the value or return type section."""
    raw = member.element.raw
    if isinstance(member, Property):
        label, rtype = "Property Value", member.type
    else:
        label, rtype = "Returns", str(raw.get("returns") or "")
    if not rtype:
        return []
    parts = [f"#### {label}", "", f"**Type:** {md_code(rtype)}", ""]
    if isinstance(member, Property):
        access = "read-only" if member.is_final else "read / write"
        if member.is_const:
            access = "constant"
        if member.accessor_elements[0] is None:
            access = "write-only"
        parts += [f"**Access:** {access}", ""]
    return parts


def render_member(
    member: Member,
    linker: CommentLinker,
    *,
    code_language: str = "dart",
) -> list[str]:
    """Render a single member section."""
    parts = [f"### {member.name}", ""]
    flags = [
        flag
        for flag, on in (("static", member.is_static), ("deprecated", member.is_deprecated))
        if on
    ]
    if flags:
        parts += [f"*{', '.join(flags)}*", ""]
    if member.signature:
        parts += [md_codeblock(code_language, member.signature), ""]

    summary = linker.link(member.summary, member)
    if summary:
        parts += [summary, ""]

    parts.extend(_render_member_params(member, linker))
    parts.extend(_render_member_returns(member))
    return parts
