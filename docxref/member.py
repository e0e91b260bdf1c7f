"""Members of containers and libraries: constructors, methods and functions."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import TYPE_CHECKING

from docxref.element_kind import ElementKind
from docxref.entity_kind import EntityKind
from docxref.entry_generators import add_entries_if_absent, generate_entries
from docxref.model_element import ModelElement

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable
    from docxref.element import Element
    from docxref.package_graph import PackageGraph
    from docxref.parameter import Parameter, TypeParameter


class Member(ModelElement):
    """A member declared in a container or at the top level of a library.

    Inherited members are distinct entities presented in the inheriting
    container. Their references are searched in the inheriting container;
    their parameters resolve against the container that declared them.
    """

    def __init__(
        self,
        element: Element,
        package_graph: PackageGraph,
        inherited_by: ModelElement | None = None,
    ) -> None:
        """Wrap ``element``, optionally as presented in ``inherited_by``."""
        super().__init__(element, package_graph)
        self.inherited_by = inherited_by

    @property
    def kind(self) -> EntityKind:
        return EntityKind.MEMBER

    @property
    def enclosing_element(self) -> ModelElement | None:
        return self.inherited_by or self.declaring_element

    @property
    def is_inherited(self) -> bool:
        return (
            self.inherited_by is not None
            and self.inherited_by is not self.declaring_element
        )

    @property
    def is_callable(self) -> bool:
        return False

    @property
    def href(self) -> str | None:
        # Inherited members link to their declaration.
        declaring = self.declaring_element
        if declaring is None or declaring.href is None:
            return None
        return f"{declaring.href}#{self.anchor}"

    def _children_of_kind(self, kind: ElementKind) -> list:
        children = [
            self.package_graph.model_element_for(e)
            for e in self.package_graph.children_of(self.uid)
            if e.kind is kind
        ]
        if not self.is_inherited:
            return children
        return [self.package_graph.presented_in(c, self) for c in children]

    @cached_property
    def parameters(self) -> list[Parameter]:
        return self._children_of_kind(ElementKind.PARAMETER)

    @cached_property
    def type_parameters(self) -> list[TypeParameter]:
        return self._children_of_kind(ElementKind.TYPE_PARAMETER)

    @cached_property
    def reference_children(self) -> dict[str, CommentReferable]:
        children: dict[str, CommentReferable] = {}
        add_entries_if_absent(children, generate_entries(self.parameters))
        add_entries_if_absent(children, generate_entries(self.type_parameters))
        return children

    @property
    def reference_parents(self) -> Sequence[CommentReferable]:
        enclosing = self.enclosing_element
        return [enclosing] if enclosing is not None else []

    @property
    def reference_grandparent_overrides(self) -> Sequence[CommentReferable] | None:
        if self.is_inherited and self.declaring_element is not None:
            return [self.declaring_element]
        return None


class Method(Member):
    """An instance or static method, or a top-level function."""

    @property
    def is_callable(self) -> bool:
        return True


class Constructor(Member):
    """A constructor; the unnamed one is referenced by its container's name."""

    @property
    def is_unnamed(self) -> bool:
        return not self.element.name

    @property
    def container_name(self) -> str:
        container = self.declaring_element
        return container.name if container is not None else ""

    @property
    def name(self) -> str:
        if self.is_unnamed:
            return self.container_name
        return f"{self.container_name}.{self.element.name}"

    @property
    def reference_name(self) -> str:
        return self.element.name or self.container_name

    @property
    def is_callable(self) -> bool:
        return True
