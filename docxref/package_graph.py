"""Registry of every element and entity of one documentation run."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import TYPE_CHECKING, Any

from docxref.accessor import Accessor, Property
from docxref.comment_referable import CommentReferable
from docxref.container import Class, Enum, Mixin
from docxref.element import Element
from docxref.element_kind import ElementKind, is_accessor_kind
from docxref.entity_kind import EntityKind
from docxref.entry_generators import add_entries_if_absent, generate_entries
from docxref.enum_field import EnumField
from docxref.errors import InternalConsistencyError, SymbolFileError
from docxref.extension import Extension
from docxref.library import Library
from docxref.library_scope import Import, LibraryScope
from docxref.member import Constructor, Method
from docxref.package import Package
from docxref.parameter import Parameter, TypeParameter

if TYPE_CHECKING:
    from docxref.model_element import ModelElement


class PackageGraph(CommentReferable):
    """Elements of all loaded libraries and the entities built from them.

    The graph is filled once by :func:`docxref.build_package_graph.build_package_graph`
    and is read-only afterwards. Entities are created on first use and cached,
    so every element maps to exactly one entity for the whole run.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Initialize an empty graph using the ``output`` and ``visibility`` config."""
        config = config or {}
        self.api_root: str = config.get("output", {}).get("api_root", "/api")
        self.include_private: bool = bool(
            config.get("visibility", {}).get("include_private", False)
        )
        self.elements: dict[str, Element] = {}
        self._children: dict[str, list[Element]] = {}
        self._imports: dict[str, list[Import]] = {}
        self._library_packages: dict[str, str] = {}
        self._entities: dict[Any, ModelElement] = {}
        self._packages: dict[str, Package] = {}
        self._scopes: dict[str, LibraryScope] = {}

    # -----------------------------
    # Registration (build phase)
    # -----------------------------

    def add_library(
        self, element: Element, package: str, imports: list[Import]
    ) -> None:
        """Register a library element with its package and imports."""
        self.add_element(element)
        self._library_packages[element.uid] = package
        self._imports[element.uid] = imports

    def add_element(self, element: Element) -> None:
        """Register an element under its uid and its enclosing element."""
        if element.uid in self.elements:
            msg = f"Duplicate uid {element.uid!r}"
            raise SymbolFileError(msg)
        self.elements[element.uid] = element
        if element.enclosing is not None:
            self._children.setdefault(element.enclosing, []).append(element)

    def validate(self) -> None:
        """Check that every enclosing uid refers to a known element."""
        for uid, children in self._children.items():
            if uid not in self.elements:
                names = ", ".join(sorted(c.uid for c in children))
                msg = f"Unknown parent {uid!r} referenced by: {names}"
                raise SymbolFileError(msg)

    # -----------------------------
    # Element queries
    # -----------------------------

    def element(self, uid: str) -> Element | None:
        return self.elements.get(uid)

    def children_of(self, uid: str) -> list[Element]:
        return self._children.get(uid, [])

    def imports_of(self, library_uid: str) -> list[Import]:
        return self._imports.get(library_uid, [])

    def package_name_of(self, library_uid: str) -> str:
        return self._library_packages.get(library_uid, "")

    def library_element(self, name: str) -> Element | None:
        element = self.elements.get(name)
        if element is None or element.kind is not ElementKind.LIBRARY:
            return None
        return element

    def scope_for(self, library_uid: str) -> LibraryScope:
        scope = self._scopes.get(library_uid)
        if scope is None:
            scope = self._scopes.setdefault(library_uid, LibraryScope(library_uid, self))
        return scope

    def synthetic_accessors(
        self, prop: Element
    ) -> tuple[Element | None, Element | None]:
        """Return the implicit getter and setter of a property element.

        Final and const properties have no setter. The accessors are registered
        on first request.
        """
        getter = self.elements.get(f"{prop.uid}#get")
        if getter is None:
            getter = self._add_synthetic_accessor(prop, ElementKind.GETTER, "get")
        setter = None
        if not (prop.raw.get("final") or prop.raw.get("const")):
            setter = self.elements.get(f"{prop.uid}#set")
            if setter is None:
                setter = self._add_synthetic_accessor(prop, ElementKind.SETTER, "set")
        return getter, setter

    def _add_synthetic_accessor(
        self, prop: Element, kind: ElementKind, suffix: str
    ) -> Element:
        accessor = Element(
            uid=f"{prop.uid}#{suffix}",
            kind=kind,
            name=prop.name,
            library=prop.library,
            enclosing=prop.enclosing,
            file=prop.file,
            raw={"synthetic": True, "static": prop.raw.get("static", False)},
            variable=prop.uid,
        )
        # Not added to the children index: the property stands for it there.
        return self.elements.setdefault(accessor.uid, accessor)

    def explicit_accessors(
        self, accessor: Element
    ) -> tuple[Element | None, Element | None]:
        """Return the getter and setter declared next to ``accessor`` by name."""
        getter = setter = None
        siblings = (
            self.children_of(accessor.enclosing) if accessor.enclosing else [accessor]
        )
        for e in siblings:
            if e.name != accessor.name:
                continue
            if e.kind is ElementKind.GETTER and getter is None:
                getter = e
            elif e.kind is ElementKind.SETTER and setter is None:
                setter = e
        return getter, setter

    # -----------------------------
    # Entity factory
    # -----------------------------

    def model_element_for(self, element: Element) -> ModelElement:
        """Return the one entity wrapping ``element``, creating it if needed."""
        entity = self._entities.get(element.uid)
        if entity is None:
            # Racing creators agree on whichever entity is stored first.
            entity = self._entities.setdefault(element.uid, self._create(element))
        return entity

    def model_element_for_uid(self, uid: str) -> ModelElement | None:
        element = self.elements.get(uid)
        return self.model_element_for(element) if element is not None else None

    def _create(self, element: Element) -> ModelElement:
        kind = element.kind
        if kind is ElementKind.LIBRARY:
            return Library(element, self)
        if kind is ElementKind.CLASS:
            return Class(element, self)
        if kind is ElementKind.MIXIN:
            return Mixin(element, self)
        if kind is ElementKind.ENUM:
            return Enum(element, self)
        if kind is ElementKind.EXTENSION:
            return Extension(element, self)
        if kind is ElementKind.CONSTRUCTOR:
            return Constructor(element, self)
        if kind in {ElementKind.METHOD, ElementKind.FUNCTION}:
            return Method(element, self)
        if kind is ElementKind.PROPERTY:
            return Property(element, self)
        if kind in {ElementKind.GETTER, ElementKind.SETTER}:
            return Accessor(element, self)
        if kind is ElementKind.ENUM_VALUE:
            return EnumField(element, self)
        if kind is ElementKind.PARAMETER:
            return Parameter(element, self)
        if kind is ElementKind.TYPE_PARAMETER:
            return TypeParameter(element, self)
        msg = f"No entity kind for element {element.uid!r} of kind {kind!r}"
        raise InternalConsistencyError(msg)

    def property_for(self, element: Element) -> Property:
        """Return the property a property, getter or setter element belongs to."""
        if element.kind is ElementKind.PROPERTY:
            return self.model_element_for(element)
        if not is_accessor_kind(element.kind):
            msg = f"{element.uid!r} is not a property or accessor"
            raise InternalConsistencyError(msg)
        if element.variable is not None:
            return self.model_element_for(self.elements[element.variable])
        getter, setter = self.explicit_accessors(element)
        primary = getter or setter or element
        key = ("property", primary.uid)
        entity = self._entities.get(key)
        if entity is None:
            entity = self._entities.setdefault(key, Property(primary, self))
        return entity

    def presented_in(self, entity: ModelElement, enclosing: ModelElement) -> Any:
        """Return ``entity`` as inherited by, or nested in, ``enclosing``."""
        key = ("presented", type(entity).__name__, entity.uid, id(enclosing))
        presented = self._entities.get(key)
        if presented is None:
            presented = self._entities.setdefault(
                key,
                type(entity)(entity.element, self, inherited_by=enclosing),
            )
        return presented

    def entities_for(self, elements: list[Element]) -> list[Any]:
        """Entities of ``elements`` in order, with accessor pairs fused."""
        out: list[ModelElement] = []
        seen: set[int] = set()
        for element in elements:
            if is_accessor_kind(element.kind):
                entity: ModelElement = self.property_for(element)
            else:
                entity = self.model_element_for(element)
            if id(entity) not in seen:
                seen.add(id(entity))
                out.append(entity)
        return out

    # -----------------------------
    # Entity queries
    # -----------------------------

    @cached_property
    def libraries(self) -> list[Library]:
        return sorted(
            (
                self.model_element_for(e)
                for e in self.elements.values()
                if e.kind is ElementKind.LIBRARY
            ),
            key=lambda lib: lib.name.lower(),
        )

    def library_named(self, name: str) -> Library | None:
        element = self.library_element(name)
        return self.model_element_for(element) if element is not None else None

    def package_named(self, name: str) -> Package:
        package = self._packages.get(name)
        if package is None:
            package = self._packages.setdefault(name, Package(name, self))
        return package

    @property
    def packages(self) -> list[Package]:
        names = sorted(set(self._library_packages.values()))
        return [self.package_named(n) for n in names]

    @cached_property
    def extensions(self) -> list[Extension]:
        return [e for lib in self.libraries for e in lib.extensions]

    # -----------------------------
    # CommentReferable
    # -----------------------------

    @property
    def name(self) -> str:
        return ""

    @property
    def kind(self) -> EntityKind:
        return EntityKind.PACKAGE_GRAPH

    @cached_property
    def reference_children(self) -> dict[str, CommentReferable]:
        children: dict[str, CommentReferable] = {}
        add_entries_if_absent(children, generate_entries(self.libraries))
        add_entries_if_absent(children, generate_entries(self.packages))
        return children

    @property
    def reference_parents(self) -> Sequence[CommentReferable]:
        return []
