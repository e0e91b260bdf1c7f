"""Properties and their accessors (getter/setter)."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import TYPE_CHECKING

from docxref.element_kind import ElementKind
from docxref.entity_kind import EntityKind
from docxref.member import Member

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable
    from docxref.element import Element


class Property(Member):
    """A field or top-level variable, or a getter/setter pair.

    This is the single logical member that both accessors fuse into. When it
    comes from explicit accessors, its element is the getter when there is one.
    """

    @cached_property
    def accessor_elements(self) -> tuple[Element | None, Element | None]:
        if self.element.kind is ElementKind.PROPERTY:
            return self.package_graph.synthetic_accessors(self.element)
        return self.package_graph.explicit_accessors(self.element)

    @property
    def getter(self) -> Accessor | None:
        getter = self.accessor_elements[0]
        return self.package_graph.model_element_for(getter) if getter else None

    @property
    def setter(self) -> Accessor | None:
        setter = self.accessor_elements[1]
        return self.package_graph.model_element_for(setter) if setter else None

    @property
    def is_final(self) -> bool:
        return self.accessor_elements[1] is None

    @property
    def is_const(self) -> bool:
        return bool(self.element.raw.get("const"))

    @property
    def type(self) -> str:
        raw = self.element.raw
        if raw.get("type"):
            return str(raw["type"])
        setter = self.accessor_elements[1]
        return str(setter.raw.get("type") or "") if setter else ""

    @property
    def summary(self) -> str:
        # Explicit accessor pairs document the property on either accessor.
        getter, setter = self.accessor_elements
        for e in (self.element, getter, setter):
            if e is not None and e.summary:
                return e.summary
        return ""


class Accessor(Member):
    """A getter or setter; references to it resolve via its property."""

    @property
    def kind(self) -> EntityKind:
        return EntityKind.ACCESSOR

    @property
    def is_getter(self) -> bool:
        return self.element.kind is ElementKind.GETTER

    @property
    def enclosing_combo(self) -> Property:
        return self.package_graph.property_for(self.element)

    @property
    def href(self) -> str | None:
        return self.enclosing_combo.href

    @property
    def reference_parents(self) -> Sequence[CommentReferable]:
        return [self.enclosing_combo]
