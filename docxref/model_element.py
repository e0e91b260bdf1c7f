"""Base class of entities built from provider elements."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import TYPE_CHECKING

from docxref.comment_referable import CommentReferable
from docxref.markdown import header_slug

if TYPE_CHECKING:
    from docxref.element import Element
    from docxref.library import Library
    from docxref.package_graph import PackageGraph


class ModelElement(CommentReferable):
    """A documentable entity wrapping one provider :class:`Element`.

    Instances are created by :meth:`PackageGraph.model_element_for` only, so
    each element has a single entity for the whole run.
    """

    def __init__(self, element: Element, package_graph: PackageGraph) -> None:
        """Wrap ``element``, registered in ``package_graph``."""
        self.element = element
        self.package_graph = package_graph

    @property
    def name(self) -> str:
        return self.element.name

    @property
    def uid(self) -> str:
        return self.element.uid

    @property
    def summary(self) -> str:
        return self.element.summary

    @property
    def signature(self) -> str:
        return str(self.element.raw.get("signature") or "")

    @property
    def is_private(self) -> bool:
        return self.element.is_private

    @property
    def is_deprecated(self) -> bool:
        return bool(self.element.raw.get("deprecated"))

    @property
    def is_static(self) -> bool:
        return self.element.is_static

    @property
    def is_public(self) -> bool:
        """Whether the entity gets documented under the current visibility."""
        return not self.is_private or self.package_graph.include_private

    @cached_property
    def declaring_element(self) -> ModelElement | None:
        """Entity of the declaring element (container, member or library)."""
        if self.element.enclosing is None:
            return None
        return self.package_graph.model_element_for_uid(self.element.enclosing)

    @property
    def enclosing_element(self) -> ModelElement | None:
        """Entity this one is presented in; the declaring one by default."""
        return self.declaring_element

    @property
    def library(self) -> Library | None:
        return self.package_graph.library_named(self.element.library)

    @property
    def anchor(self) -> str:
        return header_slug(self.name)

    @cached_property
    def reference_children(self) -> dict[str, CommentReferable]:
        return {}

    @property
    def reference_parents(self) -> Sequence[CommentReferable]:
        enclosing = self.enclosing_element
        return [enclosing] if enclosing is not None else []
