"""Parameters and type parameters of members and containers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.entity_kind import EntityKind
from docxref.model_element import ModelElement

if TYPE_CHECKING:
    from docxref.element import Element
    from docxref.package_graph import PackageGraph


class LocalElement(ModelElement):
    """An entity local to a member or container; it has no page of its own."""

    def __init__(
        self,
        element: Element,
        package_graph: PackageGraph,
        inherited_by: ModelElement | None = None,
    ) -> None:
        """Wrap ``element``, optionally presented in an inherited member."""
        super().__init__(element, package_graph)
        self.inherited_by = inherited_by

    @property
    def enclosing_element(self) -> ModelElement | None:
        return self.inherited_by or self.declaring_element

    @property
    def type(self) -> str:
        return str(self.element.raw.get("type") or "")


class Parameter(LocalElement):
    """A parameter of a method, function or constructor."""

    @property
    def kind(self) -> EntityKind:
        return EntityKind.PARAMETER


class TypeParameter(LocalElement):
    """A type parameter of a generic container or member."""

    @property
    def kind(self) -> EntityKind:
        return EntityKind.TYPE_PARAMETER

    @property
    def bound(self) -> str:
        return str(self.element.raw.get("bound") or "")
