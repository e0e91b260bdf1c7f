"""Provider scope of a library: its own declarations, then its imports."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docxref.element_kind import ElementKind, is_accessor_kind
from docxref.scope import Scope, ScopeLookupResult

if TYPE_CHECKING:
    from docxref.element import Element
    from docxref.package_graph import PackageGraph

logger = logging.getLogger(__name__)

# Kinds declared at the top level of a library and visible in its scope.
TOP_LEVEL_KINDS = {
    ElementKind.CLASS,
    ElementKind.MIXIN,
    ElementKind.ENUM,
    ElementKind.EXTENSION,
    ElementKind.FUNCTION,
    ElementKind.PROPERTY,
    ElementKind.GETTER,
    ElementKind.SETTER,
}


@dataclass(frozen=True)
class Import:
    """An import directive of a library."""

    library: str
    prefix: str | None = None
    show: frozenset[str] = field(default_factory=frozenset)
    hide: frozenset[str] = field(default_factory=frozenset)

    def exposes(self, name: str) -> bool:
        """Check whether ``name`` passes the show/hide combinators."""
        if self.show and name not in self.show:
            return False
        return name not in self.hide


class LibraryScope(Scope):
    """Names visible inside a library, as the analysis provider reports them."""

    def __init__(self, library_uid: str, package_graph: PackageGraph) -> None:
        """Initialize the scope for the library element ``library_uid``."""
        self.library_uid = library_uid
        self.package_graph = package_graph
        self._declarations: dict[str, ScopeLookupResult] | None = None

    @property
    def imports(self) -> list[Import]:
        return self.package_graph.imports_of(self.library_uid)

    @property
    def declarations(self) -> dict[str, ScopeLookupResult]:
        """Top-level names declared by the library itself."""
        if self._declarations is None:
            self._declarations = build_declarations(
                self.package_graph.children_of(self.library_uid),
                self.package_graph,
            )
        return self._declarations

    def lookup(self, name: str) -> ScopeLookupResult:
        """Return local declarations first, then the first matching import."""
        local = self.declarations.get(name)
        if local is not None:
            return local
        for imp in self.imports:
            if imp.prefix is not None:
                if imp.prefix == name:
                    target = self.package_graph.library_element(imp.library)
                    if target is not None:
                        return ScopeLookupResult(getter=target)
                continue
            if not imp.exposes(name) or name.startswith("_"):
                continue
            imported = self.package_graph.library_element(imp.library)
            if imported is None:
                logger.debug("Import of unknown library %s ignored", imp.library)
                continue
            found = self.package_graph.scope_for(imported.uid).declarations.get(name)
            if found is not None:
                return found
        return ScopeLookupResult()


def build_declarations(
    elements: list[Element],
    package_graph: PackageGraph,
) -> dict[str, ScopeLookupResult]:
    """Index top-level elements by name, pairing getters with setters."""
    getters: dict[str, Element] = {}
    setters: dict[str, Element] = {}
    for element in elements:
        if element.kind not in TOP_LEVEL_KINDS:
            continue
        if element.kind is ElementKind.PROPERTY:
            getter, setter = package_graph.synthetic_accessors(element)
            if getter is not None:
                getters.setdefault(element.name, getter)
            if setter is not None:
                setters.setdefault(element.name, setter)
        elif element.kind is ElementKind.SETTER:
            setters.setdefault(element.name, element)
        else:
            getters.setdefault(element.name, element)

    declarations: dict[str, ScopeLookupResult] = {}
    for name in [*getters, *setters]:
        getter = getters.get(name)
        setter = setters.get(name)
        if getter is not None and not is_accessor_kind(getter.kind):
            # A class or function name hides any same-named setter.
            setter = None
        declarations[name] = ScopeLookupResult(getter=getter, setter=setter)
    return declarations
