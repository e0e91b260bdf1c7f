"""Collapse getter/setter pairs into one logical property."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.errors import InternalConsistencyError

if TYPE_CHECKING:
    from docxref.accessor import Property
    from docxref.element import Element
    from docxref.package_graph import PackageGraph


def fuse_accessors(
    getter: Element | None,
    setter: Element | None,
    package_graph: PackageGraph,
) -> Property:
    """Return the single property entity owning ``getter`` and/or ``setter``.

    The getter's identity is preferred when both exist.
    """
    primary = getter or setter
    if primary is None:
        msg = "accessor fusion needs a getter or a setter"
        raise InternalConsistencyError(msg)
    prop = package_graph.property_for(primary)
    if getter is not None and setter is not None:
        other = package_graph.property_for(setter)
        if other is not prop:
            msg = (
                f"getter {getter.uid} and setter {setter.uid} belong to "
                "different properties"
            )
            raise InternalConsistencyError(msg)
    return prop
