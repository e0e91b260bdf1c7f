"""Logic for building the package graph out of symbol files."""

from pathlib import Path
from typing import Any

from docxref.element import Element
from docxref.element_kind import ElementKind
from docxref.errors import SymbolFileError
from docxref.library_scope import Import
from docxref.load_symbol_file import as_text, load_symbol_file
from docxref.package_graph import PackageGraph

# Kinds that only the loader creates, never an item.
DERIVED_KINDS = {
    ElementKind.LIBRARY,
    ElementKind.PARAMETER,
    ElementKind.TYPE_PARAMETER,
}


def build_package_graph(
    symbol_files: list[Path],
    config: dict[str, Any] | None = None,
) -> PackageGraph:
    """Index all symbol files into one package graph."""
    graph = PackageGraph(config)
    for f in symbol_files:
        doc = load_symbol_file(f)
        library = str(doc.get("library") or "").strip()
        if not library:
            msg = f"{f}: missing 'library'"
            raise SymbolFileError(msg)
        package = str(doc.get("package") or library.split(".")[0])
        graph.add_library(
            Element(
                uid=library,
                kind=ElementKind.LIBRARY,
                name=library,
                library=library,
                enclosing=None,
                summary=as_text(doc.get("summary")),
                file=f,
                raw=doc,
            ),
            package,
            [parse_import(i, f) for i in doc.get("imports") or []],
        )
        for it in doc.get("items") or []:
            for element in elements_for_item(it, library, f):
                graph.add_element(element)
    graph.validate()
    return graph


def parse_import(value: object, path: Path) -> Import:
    """Parse an import given as a library name or as a mapping."""
    if isinstance(value, str):
        return Import(library=value)
    if isinstance(value, dict) and value.get("library"):
        prefix = value.get("prefix")
        return Import(
            library=str(value["library"]),
            prefix=str(prefix) if prefix else None,
            show=frozenset(str(n) for n in value.get("show") or []),
            hide=frozenset(str(n) for n in value.get("hide") or []),
        )
    msg = f"{path}: invalid import {value!r}"
    raise SymbolFileError(msg)


def parse_kind(value: object, uid: str, path: Path) -> ElementKind:
    """Parse an item kind, rejecting unknown and loader-only kinds."""
    try:
        kind = ElementKind(str(value or "").strip().lower())
    except ValueError:
        kind = None
    if kind is None or kind in DERIVED_KINDS:
        msg = f"{path}: item {uid!r} has unsupported kind {value!r}"
        raise SymbolFileError(msg)
    return kind


def elements_for_item(it: object, library: str, path: Path) -> list[Element]:
    """Build the element of one item plus the elements nested in it."""
    if not isinstance(it, dict) or not it.get("uid"):
        msg = f"{path}: every item needs a uid, got {it!r}"
        raise SymbolFileError(msg)
    uid = str(it["uid"])
    kind = parse_kind(it.get("kind"), uid, path)
    default_name = "" if kind is ElementKind.CONSTRUCTOR else uid.rsplit(".", 1)[-1]
    name = str(it.get("name") if it.get("name") is not None else default_name)
    parent = it.get("parent")

    element = Element(
        uid=uid,
        kind=kind,
        name=name,
        library=library,
        enclosing=str(parent) if parent else library,
        summary=as_text(it.get("summary")),
        file=path,
        raw=it,
    )
    out = [element]
    out.extend(_type_parameters(element))
    out.extend(_parameters(element))
    if kind is ElementKind.ENUM:
        out.extend(_enum_synthetics(element))
    return out


def _type_parameters(owner: Element) -> list[Element]:
    out = []
    for tp in owner.raw.get("typeParameters") or []:
        raw = tp if isinstance(tp, dict) else {"name": tp}
        name = str(raw.get("name") or "")
        out.append(
            Element(
                uid=f"{owner.uid}<{name}>",
                kind=ElementKind.TYPE_PARAMETER,
                name=name,
                library=owner.library,
                enclosing=owner.uid,
                summary=as_text(raw.get("summary")),
                file=owner.file,
                raw=raw,
            )
        )
    return out


def _parameters(owner: Element) -> list[Element]:
    out = []
    for p in owner.raw.get("parameters") or []:
        raw = p if isinstance(p, dict) else {"name": p}
        name = str(raw.get("name") or raw.get("id") or "")
        out.append(
            Element(
                uid=f"{owner.uid}({name})",
                kind=ElementKind.PARAMETER,
                name=name,
                library=owner.library,
                enclosing=owner.uid,
                summary=as_text(raw.get("summary") or raw.get("description")),
                file=owner.file,
                raw=raw,
            )
        )
    return out


def _enum_synthetics(enum: Element) -> list[Element]:
    """Every enum has a static ``values`` list and an ``index`` field."""
    return [
        Element(
            uid=f"{enum.uid}#values",
            kind=ElementKind.ENUM_VALUE,
            name="values",
            library=enum.library,
            enclosing=enum.uid,
            summary="A constant List of the values in this enum, in order of their declaration.",
            file=enum.file,
            raw={"synthetic": True, "static": True, "type": f"List<{enum.name}>"},
        ),
        Element(
            uid=f"{enum.uid}#index",
            kind=ElementKind.PROPERTY,
            name="index",
            library=enum.library,
            enclosing=enum.uid,
            summary="The integer index of this enum value.",
            file=enum.file,
            raw={"synthetic": True, "final": True, "type": "int"},
        ),
    ]
