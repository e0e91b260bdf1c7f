"""Libraries: the top-level unit of declarations and of name scope."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import TYPE_CHECKING

from docxref.accessor import Accessor, Property
from docxref.container import Class, Enum, Mixin
from docxref.entity_kind import EntityKind
from docxref.entry_generators import (
    add_entries_if_absent,
    generate_entries,
    where_not_type,
)
from docxref.extension import Extension
from docxref.member import Method
from docxref.model_element import ModelElement
from docxref.page_paths import page_path_for
from docxref.scope_adapter import ScopeAdapter

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable
    from docxref.package import Package


class Library(ModelElement):
    """A library, with a provider scope covering its declarations and imports."""

    @property
    def kind(self) -> EntityKind:
        return EntityKind.LIBRARY

    @property
    def library(self) -> Library:
        return self

    @property
    def package_name(self) -> str:
        return self.package_graph.package_name_of(self.uid)

    @property
    def package(self) -> Package:
        return self.package_graph.package_named(self.package_name)

    @cached_property
    def scope(self) -> ScopeAdapter:
        return ScopeAdapter(self.package_graph.scope_for(self.uid), self.package_graph)

    @property
    def href(self) -> str:
        return page_path_for(self.package_graph.api_root, self.name)

    @property
    def anchor(self) -> str:
        return ""

    @cached_property
    def top_level(self) -> list[ModelElement]:
        """Every entity declared at the top level, accessors fused."""
        return self.package_graph.entities_for(self.package_graph.children_of(self.uid))

    def _of_type(self, cls: type) -> list:
        return sorted(
            (e for e in self.top_level if isinstance(e, cls)),
            key=lambda e: e.name.lower(),
        )

    @property
    def classes(self) -> list[Class]:
        return self._of_type(Class)

    @property
    def mixins(self) -> list[Mixin]:
        return self._of_type(Mixin)

    @property
    def enums(self) -> list[Enum]:
        return self._of_type(Enum)

    @property
    def extensions(self) -> list[Extension]:
        return self._of_type(Extension)

    @property
    def functions(self) -> list[Method]:
        return self._of_type(Method)

    @property
    def properties(self) -> list[Property]:
        return self._of_type(Property)

    @cached_property
    def reference_children(self) -> dict[str, CommentReferable]:
        children: dict[str, CommentReferable] = {}
        add_entries_if_absent(
            children, generate_entries(where_not_type(self.top_level, Accessor))
        )
        return children

    @property
    def reference_parents(self) -> Sequence[CommentReferable]:
        return [self.package]
