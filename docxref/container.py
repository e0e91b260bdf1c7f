"""Containers: classes, mixins and enums, with their member indexes."""

from __future__ import annotations

from collections.abc import Iterator
from functools import cached_property
from typing import TYPE_CHECKING

from docxref.accessor import Accessor
from docxref.element_kind import ElementKind, is_member_kind
from docxref.entity_kind import CONTAINER_KINDS, EntityKind
from docxref.enum_field import EnumField
from docxref.entry_generators import (
    add_entries_if_absent,
    explicit_on_collision_with,
    generate_entries,
    where_not_type,
)
from docxref.member import Constructor, Member
from docxref.model_element import ModelElement
from docxref.page_paths import page_path_for

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable
    from docxref.parameter import TypeParameter


class Container(ModelElement):
    """A type that declares members and has a page of its own."""

    kind_label = "Container"

    @property
    def kind(self) -> EntityKind:
        return EntityKind.CONTAINER

    @property
    def href(self) -> str | None:
        library = self.library
        if library is None:
            return None
        return page_path_for(self.package_graph.api_root, library.name, self.name)

    @property
    def anchor(self) -> str:
        return ""

    @cached_property
    def declared_members(self) -> list[Member]:
        """Members declared in this container, accessor pairs fused."""
        elements = [
            e
            for e in self.package_graph.children_of(self.uid)
            if is_member_kind(e.kind)
        ]
        return self.package_graph.entities_for(elements)

    @property
    def constructors(self) -> list[Constructor]:
        return [m for m in self.declared_members if isinstance(m, Constructor)]

    @cached_property
    def type_parameters(self) -> list[TypeParameter]:
        return [
            self.package_graph.model_element_for(e)
            for e in self.package_graph.children_of(self.uid)
            if e.kind is ElementKind.TYPE_PARAMETER
        ]

    @property
    def instance_members(self) -> list[Member]:
        """Declared, non-static members other than constructors."""
        return [
            m
            for m in self.declared_members
            if not m.is_static and not isinstance(m, Constructor)
        ]

    @property
    def static_members(self) -> list[Member]:
        return [
            m
            for m in self.declared_members
            if m.is_static and not isinstance(m, Constructor)
        ]

    def _uids(self, *keys: str) -> list[str]:
        raw = self.element.raw
        out: list[str] = []
        for key in keys:
            value = raw.get(key)
            if isinstance(value, list):
                out.extend(str(v) for v in value)
            elif value:
                out.append(str(value))
        return out

    @cached_property
    def direct_supertypes(self) -> list[Container]:
        """Known supertypes in member lookup order: mixins last-applied first,
        then the superclass, then interfaces.

        Supertypes outside the documented symbols are skipped.
        """
        uids = [
            *reversed(self._uids("mixins")),
            *self._uids("superclass"),
            *self._uids("interfaces"),
        ]
        out: list[Container] = []
        for uid in uids:
            entity = self.package_graph.model_element_for_uid(uid)
            if entity is not None and entity.kind in CONTAINER_KINDS:
                out.append(entity)
        return out

    @cached_property
    def all_supertypes(self) -> list[Container]:
        """Transitive supertypes, depth first, each listed once."""
        seen = {self.uid}

        def visit(container: Container) -> Iterator[Container]:
            for sup in container.direct_supertypes:
                if sup.uid in seen:
                    continue
                seen.add(sup.uid)
                yield sup
                yield from visit(sup)

        return list(visit(self))

    @cached_property
    def inherited_members(self) -> list[Member]:
        """Instance members of supertypes not overridden here.

        Private members of supertypes declared in another library are not
        inherited.
        """
        seen = {m.reference_name for m in self.instance_members}
        seen.update(m.reference_name for m in self.static_members)
        out: list[Member] = []
        for sup in self.all_supertypes:
            for member in sup.instance_members:
                if member.reference_name in seen:
                    continue
                if member.is_private and member.element.library != self.element.library:
                    continue
                seen.add(member.reference_name)
                out.append(self.package_graph.presented_in(member, self))
        return out

    @cached_property
    def extension_members(self) -> list[Member]:
        """Instance members contributed by extensions on this type or a supertype."""
        targets = {self.uid, *(s.uid for s in self.all_supertypes)}
        out: list[Member] = []
        for extension in self.package_graph.extensions:
            on = extension.extended_type
            if on is not None and on.uid in targets:
                out.extend(extension.instance_members)
        return out

    @cached_property
    def reference_children(self) -> dict[str, CommentReferable]:
        children: dict[str, CommentReferable] = {}
        add_entries_if_absent(
            children,
            generate_entries(
                where_not_type(self.declared_members, Accessor, Constructor)
            ),
        )
        add_entries_if_absent(children, generate_entries(self.inherited_members))
        add_entries_if_absent(children, generate_entries(self.extension_members))
        # The unnamed constructor shares the container's name: keep it reachable
        # both as "Foo.Foo" and, from inside the container, as "Foo".
        add_entries_if_absent(
            children, explicit_on_collision_with(self.constructors, self)
        )
        add_entries_if_absent(children, generate_entries(self.constructors))
        add_entries_if_absent(
            children, explicit_on_collision_with(self.type_parameters, self)
        )
        return children


class Class(Container):
    """A class."""

    kind_label = "Class"

    @property
    def is_abstract(self) -> bool:
        return bool(self.element.raw.get("abstract"))


class Mixin(Container):
    """A mixin."""

    kind_label = "Mixin"


class Enum(Container):
    """An enum, with its constant values and synthetic ``values`` list."""

    kind_label = "Enum"

    @property
    def values(self) -> list[EnumField]:
        return [
            m
            for m in self.declared_members
            if m.kind is EntityKind.ENUM_VALUE and not m.is_values_list
        ]
