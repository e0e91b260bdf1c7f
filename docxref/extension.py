"""Extensions: members added to an existing type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.container import Container
from docxref.entity_kind import CONTAINER_KINDS, EntityKind

if TYPE_CHECKING:
    from docxref.member import Member


class Extension(Container):
    """An extension declaration on a type given by uid in ``on``."""

    kind_label = "Extension"

    @property
    def kind(self) -> EntityKind:
        return EntityKind.EXTENSION

    @property
    def extended_type(self) -> Container | None:
        on = self.element.raw.get("on")
        if not on:
            return None
        entity = self.package_graph.model_element_for_uid(str(on))
        if entity is None or entity.kind not in CONTAINER_KINDS:
            return None
        return entity

    @property
    def direct_supertypes(self) -> list[Container]:
        return []

    @property
    def inherited_members(self) -> list[Member]:
        return []

    @property
    def extension_members(self) -> list[Member]:
        return []
