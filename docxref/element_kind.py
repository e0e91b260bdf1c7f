"""Kinds of raw elements delivered by the static-analysis provider."""

from enum import Enum


class ElementKind(str, Enum):
    """Closed set of element kinds found in symbol files."""

    LIBRARY = "library"
    CLASS = "class"
    MIXIN = "mixin"
    ENUM = "enum"
    EXTENSION = "extension"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    FUNCTION = "function"
    PROPERTY = "property"
    GETTER = "getter"
    SETTER = "setter"
    ENUM_VALUE = "enum_value"
    PARAMETER = "parameter"
    TYPE_PARAMETER = "type_parameter"


def is_accessor_kind(kind: ElementKind) -> bool:
    """Check if the kind is a getter or setter."""
    return kind in {ElementKind.GETTER, ElementKind.SETTER}


def is_member_kind(kind: ElementKind) -> bool:
    """Check if the kind is a member that can live inside a container."""
    return kind in {
        ElementKind.CONSTRUCTOR,
        ElementKind.METHOD,
        ElementKind.PROPERTY,
        ElementKind.GETTER,
        ElementKind.SETTER,
        ElementKind.ENUM_VALUE,
    }
