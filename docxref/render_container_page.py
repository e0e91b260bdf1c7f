"""Rendering of container pages (classes, mixins, enums, extensions)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.accessor import Property
from docxref.container import Class, Container, Enum
from docxref.entity_kind import EntityKind
from docxref.enum_field_renderer import EnumFieldRenderer, EnumFieldRendererMarkdown
from docxref.markdown import md_code, md_codeblock, md_link, md_table
from docxref.member import Member, Method
from docxref.render_member import render_member

if TYPE_CHECKING:
    from docxref.rewrite_comment_references import CommentLinker


def _type_parameters_suffix(container: Container) -> str:
    names = [
        f"{tp.name} extends {tp.bound}" if tp.bound else tp.name
        for tp in container.type_parameters
    ]
    return f"<{', '.join(names)}>" if names else ""


def _render_container_metadata(container: Container) -> list[str]:
    """Render the library line and, for extensions, the extended type."""
    parts = []
    library = container.library
    if library is not None:
        parts.append(f"**Library:** {md_link(library.name, library.href)}")
    if container.kind is EntityKind.EXTENSION:
        on = container.extended_type
        if on is not None and on.href:
            parts.append(f"**On:** {md_link(on.name, on.href)}")
        elif container.element.raw.get("on"):
            parts.append(f"**On:** {md_code(str(container.element.raw['on']))}")
    if parts:
        parts.append("")
    return parts


def _render_supertypes(container: Container) -> list[str]:
    """Render the direct supertypes, linked where they are documented."""
    raw = container.element.raw
    rows = []
    for label, key in (
        ("Superclass", "superclass"),
        ("Mixins", "mixins"),
        ("Implements", "interfaces"),
    ):
        value = raw.get(key)
        uids = value if isinstance(value, list) else [value] if value else []
        links = []
        for uid in uids:
            entity = container.package_graph.model_element_for_uid(str(uid))
            if entity is not None and entity.href and entity.is_public:
                links.append(md_link(entity.name, entity.href))
            else:
                links.append(md_code(str(uid)))
        if links:
            rows.append(f"- **{label}:** {', '.join(links)}")
    if not rows:
        return []
    return ["## Supertypes", "", *rows, ""]


def _render_enum_values(
    enum: Enum,
    linker: CommentLinker,
    renderer: EnumFieldRenderer,
) -> list[str]:
    """Render the values table of an enum, followed by the ``values`` list."""
    fields = [m for m in enum.declared_members if m.kind is EntityKind.ENUM_VALUE]
    rows = [
        [
            renderer.render_linked_name(f),
            renderer.render_value(f),
            linker.link(f.summary, f).replace("\n", " "),
        ]
        for f in fields
        if f.is_public
    ]
    if not rows:
        return []
    return ["## Values", "", md_table(["Name", "Value", "Description"], rows), ""]


def _render_member_group(
    title: str,
    members: list[Member],
    linker: CommentLinker,
    code_language: str,
) -> list[str]:
    members = sorted((m for m in members if m.is_public), key=lambda m: m.name.lower())
    if not members:
        return []
    parts = [f"## {title}", ""]
    for m in members:
        parts.extend(render_member(m, linker, code_language=code_language))
    return parts


def _render_member_links(
    title: str, members: list[Member], note_origin: bool
) -> list[str]:
    """Render a comma-separated list of links to members documented elsewhere."""
    links = []
    for m in sorted((m for m in members if m.is_public), key=lambda m: m.name.lower()):
        link = md_link(m.name, m.href) if m.href else md_code(m.name)
        declaring = m.declaring_element
        if note_origin and declaring is not None:
            link += f" (from {declaring.name})"
        links.append(link)
    if not links:
        return []
    return [f"## {title}", "", ", ".join(links), ""]


def render_container_page(
    container: Container,
    linker: CommentLinker,
    *,
    code_language: str = "dart",
    enum_renderer: EnumFieldRenderer | None = None,
) -> str:
    """Render a container page in Markdown."""
    title = f"{container.name}{_type_parameters_suffix(container)}"
    parts: list[str] = [f"# {container.kind_label} {title}", ""]
    flags = [
        flag
        for flag, on in (
            ("abstract", isinstance(container, Class) and container.is_abstract),
            ("deprecated", container.is_deprecated),
        )
        if on
    ]
    if flags:
        parts += [f"*{', '.join(flags)}*", ""]

    parts.extend(_render_container_metadata(container))

    summary = linker.link(container.summary, container)
    if summary:
        parts += [summary, ""]

    if container.signature:
        parts += [md_codeblock(code_language, container.signature), ""]

    parts.extend(_render_supertypes(container))

    if isinstance(container, Enum):
        parts.extend(
            _render_enum_values(
                container, linker, enum_renderer or EnumFieldRendererMarkdown()
            )
        )

    instance = container.instance_members
    static = container.static_members
    groups = [
        ("Constructors", container.constructors),
        ("Properties", [m for m in instance if isinstance(m, Property)]),
        ("Methods", [m for m in instance if isinstance(m, Method)]),
        ("Static Properties", [m for m in static if isinstance(m, Property)]),
        ("Static Methods", [m for m in static if isinstance(m, Method)]),
    ]
    for group_title, members in groups:
        parts.extend(_render_member_group(group_title, members, linker, code_language))

    parts.extend(
        _render_member_links("Inherited Members", container.inherited_members, True)
    )
    parts.extend(
        _render_member_links("Extension Members", container.extension_members, True)
    )

    return "\n".join(parts).rstrip() + "\n"
