"""Uniform access to a provider scope for the reference resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.accessor_fusion import fuse_accessors
from docxref.element_kind import is_accessor_kind
from docxref.entity_kind import CONTAINER_KINDS
from docxref.errors import InternalConsistencyError

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable
    from docxref.package_graph import PackageGraph
    from docxref.scope import Scope


class ScopeAdapter:
    """Wraps a provider :class:`Scope` and returns entities instead of elements."""

    def __init__(self, scope: Scope, package_graph: PackageGraph) -> None:
        """Initialize the adapter over ``scope``."""
        self.scope = scope
        self.package_graph = package_graph

    def lookup(self, name: str) -> CommentReferable | None:
        """Return the entity visible under ``name``, or None.

        Getter/setter pairs are fused into their property. A hit owned by a
        container means the provider exposed a nested scope this adapter
        does not support, which is raised as an internal error.
        """
        found = self.scope.lookup(name)
        element = found.preferred
        if element is None:
            return None
        if is_accessor_kind(element.kind):
            result = fuse_accessors(found.getter, found.setter, self.package_graph)
        else:
            result = self.package_graph.model_element_for(element)
        enclosing = result.enclosing_element
        if enclosing is not None and enclosing.kind in CONTAINER_KINDS:
            msg = (
                f"container member {result!r} found via scope lookup of {name!r}; "
                "scopes inside containers are not supported"
            )
            raise InternalConsistencyError(msg)
        return result
