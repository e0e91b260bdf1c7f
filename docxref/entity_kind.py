"""Kinds of documentable entities built from provider elements."""

from enum import Enum


class EntityKind(str, Enum):
    """Closed set of entity kinds taking part in reference resolution."""

    PACKAGE_GRAPH = "package_graph"
    PACKAGE = "package"
    LIBRARY = "library"
    CONTAINER = "container"
    EXTENSION = "extension"
    MEMBER = "member"
    ACCESSOR = "accessor"
    ENUM_VALUE = "enum_value"
    PARAMETER = "parameter"
    TYPE_PARAMETER = "type_parameter"


# Entity kinds that declare members and have pages of their own.
CONTAINER_KINDS = {EntityKind.CONTAINER, EntityKind.EXTENSION}
