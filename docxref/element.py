"""Data model for raw elements delivered by the static-analysis provider."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docxref.element_kind import ElementKind


@dataclass
class Element:
    """Represents one declared program element (class, method, etc.)."""

    uid: str
    kind: ElementKind
    name: str
    library: str  # name of the declaring library
    enclosing: str | None  # uid of the enclosing element, None for libraries
    summary: str = ""
    file: Path | None = None
    raw: dict[str, Any] = field(default_factory=dict)  # original parsed item
    variable: str | None = None  # property uid for synthetic accessors

    @property
    def is_static(self) -> bool:
        """Whether the element is declared static."""
        return bool(self.raw.get("static"))

    @property
    def is_private(self) -> bool:
        """Whether the element name is library-private."""
        return self.name.startswith("_")

    @property
    def is_synthetic(self) -> bool:
        """Whether the element was created by the provider, not declared."""
        return bool(self.raw.get("synthetic"))
