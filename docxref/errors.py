"""Exceptions raised while loading symbols and resolving references."""


class SymbolFileError(Exception):
    """A symbol file is missing, unreadable or describes an invalid item."""


class InternalConsistencyError(AssertionError):
    """The entity graph is in a state the resolver does not support.

    Raised instead of returning a possibly wrong entity, since a wrong entity
    would silently corrupt generated links.
    """
