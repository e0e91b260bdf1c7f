"""Resolution of dotted comment references against the entity graph."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from docxref.reference_children_lookup import ReferenceChildrenLookup, child_lookups

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable, ReferableFilter

logger = logging.getLogger(__name__)

# (id(entity), reference, try_parents) states currently being searched.
_ActiveStates = set[tuple[int, tuple[str, ...], bool]]


def _always(_: CommentReferable) -> bool:
    return True


def reference_by(
    origin: CommentReferable,
    reference: Sequence[str],
    *,
    try_parents: bool = True,
    filter_fn: ReferableFilter | None = None,
    allow_tree: ReferableFilter | None = None,
    parent_overrides: Sequence[CommentReferable] | None = None,
) -> CommentReferable | None:
    """Look up a comment reference by its component parts.

    The origin's scope and reference children are searched first, one
    candidate split of ``reference`` at a time, shortest prefix first. If
    ``try_parents`` is true, the same reference is then tried in each of
    ``parent_overrides`` (default: the origin's reference parents).

    Results failing ``filter_fn`` are skipped and the search continues.
    Subtrees whose root fails ``allow_tree`` are never descended into.
    Returns ``None`` when the reference does not resolve.
    """
    return _reference_by(
        origin,
        list(reference),
        try_parents,
        filter_fn or _always,
        allow_tree or _always,
        parent_overrides,
        set(),
    )


def _reference_by(
    origin: CommentReferable,
    reference: list[str],
    try_parents: bool,
    filter_fn: ReferableFilter,
    allow_tree: ReferableFilter,
    parent_overrides: Sequence[CommentReferable] | None,
    active: _ActiveStates,
) -> CommentReferable | None:
    if not reference:
        return None if try_parents else origin

    state = (id(origin), tuple(reference), try_parents)
    if state in active:
        logger.debug(
            "Cycle while resolving %s from %r; abandoning this branch",
            ".".join(reference),
            origin,
        )
        return None
    active.add(state)
    try:
        result = _search_children(origin, reference, filter_fn, allow_tree, active)
        if result is None and try_parents:
            parents = (
                origin.reference_parents if parent_overrides is None else parent_overrides
            )
            for parent in parents:
                result = _reference_by(
                    parent,
                    reference,
                    True,
                    filter_fn,
                    allow_tree,
                    parent.reference_grandparent_overrides,
                    active,
                )
                if result is not None:
                    break
        return result
    finally:
        active.discard(state)


def _search_children(
    origin: CommentReferable,
    reference: list[str],
    filter_fn: ReferableFilter,
    allow_tree: ReferableFilter,
    active: _ActiveStates,
) -> CommentReferable | None:
    """Try every candidate split against the origin's scope, then its children."""
    for lookup in child_lookups(reference):
        scope = origin.scope
        if scope is not None:
            found = scope.lookup(lookup.lookup)
            if found is not None:
                result = _recurse_children_and_filter(
                    lookup, found, filter_fn, allow_tree, active
                )
                if result is not None:
                    return result
        children = origin.reference_children
        if lookup.lookup in children:
            result = _recurse_children_and_filter(
                lookup, children[lookup.lookup], filter_fn, allow_tree, active
            )
            if result is not None:
                return result
    return None


def _recurse_children_and_filter(
    lookup: ReferenceChildrenLookup,
    result: CommentReferable,
    filter_fn: ReferableFilter,
    allow_tree: ReferableFilter,
    active: _ActiveStates,
) -> CommentReferable | None:
    """Resolve the rest of ``lookup`` below ``result``, honoring the filters."""
    found: CommentReferable | None = result
    if lookup.remaining:
        if not allow_tree(result):
            return None
        found = _reference_by(
            result, lookup.remaining, False, filter_fn, allow_tree, None, active
        )
    elif not filter_fn(result):
        # A filtered-out hit may still own a child of the same name.
        found = _reference_by(
            result, [lookup.lookup], False, filter_fn, allow_tree, None, active
        )
    if found is None or not filter_fn(found):
        return None
    return found
