"""Name scopes as exposed by the static-analysis provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docxref.element import Element


@dataclass(frozen=True)
class ScopeLookupResult:
    """Result of a scope lookup: zero or one element, or an accessor pair.

    Non-accessor elements are reported as the getter.
    """

    getter: Element | None = None
    setter: Element | None = None

    @property
    def preferred(self) -> Element | None:
        """Prefer the getter for a bundled lookup if both exist."""
        return self.getter or self.setter


class Scope(ABC):
    """A provider name scope, keyed by simple name."""

    @abstractmethod
    def lookup(self, name: str) -> ScopeLookupResult:
        """Return the elements visible under ``name``."""

