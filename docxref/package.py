"""Packages: named groups of libraries."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property
from typing import TYPE_CHECKING

from docxref.comment_referable import CommentReferable
from docxref.entity_kind import EntityKind
from docxref.entry_generators import add_entries_if_absent, explicit_on_collision_with

if TYPE_CHECKING:
    from docxref.library import Library
    from docxref.package_graph import PackageGraph


class Package(CommentReferable):
    """A package and the libraries it ships."""

    def __init__(self, name: str, package_graph: PackageGraph) -> None:
        """Initialize the package ``name`` of ``package_graph``."""
        self._name = name
        self.package_graph = package_graph

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> EntityKind:
        return EntityKind.PACKAGE

    @property
    def libraries(self) -> list[Library]:
        return [
            lib for lib in self.package_graph.libraries if lib.package_name == self.name
        ]

    @cached_property
    def reference_children(self) -> dict[str, CommentReferable]:
        # A library named like its package is reachable as "pkg.pkg".
        children: dict[str, CommentReferable] = {}
        add_entries_if_absent(children, explicit_on_collision_with(self.libraries, self))
        return children

    @property
    def reference_parents(self) -> Sequence[CommentReferable]:
        return [self.package_graph]
