"""Helpers for building ``reference_children`` maps out of entity collections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable

Entry = tuple[str, "CommentReferable"]


def explicit_on_collision_with(
    referables: Iterable[CommentReferable],
    primary: CommentReferable,
) -> Iterator[Entry]:
    """Generate entries, prefixing names that collide with ``primary``.

    A colliding entry is re-keyed as ``"<primary>.<name>"`` so both stay
    reachable.
    """
    for r in referables:
        if r.reference_name == primary.reference_name:
            yield f"{primary.reference_name}.{r.reference_name}", r
        else:
            yield r.reference_name, r


def generate_entries(referables: Iterable[CommentReferable]) -> Iterator[Entry]:
    """Generate plain entries keyed by reference name."""
    for r in referables:
        yield r.reference_name, r


def where_not_type(
    referables: Iterable[CommentReferable],
    *types: type,
) -> Iterator[CommentReferable]:
    """Yield all values that are not instances of ``types``."""
    for r in referables:
        if not isinstance(r, types):
            yield r


def add_entries_if_absent(
    mapping: dict[str, CommentReferable],
    entries: Iterable[Entry],
) -> None:
    """Like ``dict.setdefault`` over many entries: the first writer wins."""
    for key, value in entries:
        mapping.setdefault(key, value)
