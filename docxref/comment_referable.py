"""Shared interface of everything a comment reference can point at."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from docxref.reference_by import reference_by

if TYPE_CHECKING:
    from docxref.entity_kind import EntityKind
    from docxref.library import Library
    from docxref.scope_adapter import ScopeAdapter

ReferableFilter = Callable[["CommentReferable"], bool]


class CommentReferable(ABC):
    """Support comment reference lookups on a named entity.

    Implementations describe where to look (``scope``, ``reference_children``,
    ``reference_parents``); the search itself lives in
    :func:`docxref.reference_by.reference_by`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Declared name."""

    @property
    @abstractmethod
    def kind(self) -> EntityKind:
        """Entity kind."""

    @property
    def reference_name(self) -> str:
        """Key under which parents index this entity."""
        return self.name

    @property
    def scope(self) -> ScopeAdapter | None:
        """Provider scope for this entity, if one exists.

        Takes priority over ``reference_children``.
        """
        return None

    @property
    def href(self) -> str | None:
        """Page path of this entity, if it has one."""
        return None

    @property
    def library(self) -> Library | None:
        """Library this entity is declared in, if any."""
        return None

    @property
    @abstractmethod
    def reference_children(self) -> dict[str, CommentReferable]:
        """Map of reference name to the entities that are members of this one.

        There is no need to duplicate entries that ``scope`` can find.
        """

    @property
    @abstractmethod
    def reference_parents(self) -> Sequence[CommentReferable]:
        """Entities to search, in order, when this one cannot resolve a name."""

    @property
    def reference_grandparent_overrides(self) -> Sequence[CommentReferable] | None:
        """Replacement for this entity's parents when it is searched as a parent.

        ``None`` keeps the natural ``reference_parents``.
        """
        return None

    def reference_by(
        self,
        reference: Sequence[str],
        *,
        try_parents: bool = True,
        filter_fn: ReferableFilter | None = None,
        allow_tree: ReferableFilter | None = None,
        parent_overrides: Sequence[CommentReferable] | None = None,
    ) -> CommentReferable | None:
        """Look up a comment reference by its component parts."""
        return reference_by(
            self,
            reference,
            try_parents=try_parents,
            filter_fn=filter_fn,
            allow_tree=allow_tree,
            parent_overrides=parent_overrides,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reference_name!r})"
