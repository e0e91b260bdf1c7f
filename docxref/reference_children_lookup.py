"""Candidate splits of a dotted comment reference."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReferenceChildrenLookup:
    """One way of reading a dotted reference: a child name plus the rest."""

    lookup: str
    remaining: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        """Render as ``lookup (lookup.remaining)`` for log messages."""
        tail = "." + ".".join(self.remaining) if self.remaining else ""
        return f"{self.lookup} ({self.lookup}{tail})"


def child_lookups(reference: list[str]) -> list[ReferenceChildrenLookup]:
    """Return the lookups to attempt on children, shortest prefix first.

    A dot may separate two names or be part of one library name, so every
    split point is a candidate.
    """
    return [
        ReferenceChildrenLookup(".".join(reference[:index]), reference[index:])
        for index in range(1, len(reference) + 1)
    ]
