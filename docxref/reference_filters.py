"""Filters applied while resolving references found in comments."""

from docxref.comment_referable import CommentReferable, ReferableFilter
from docxref.find_comment_references import CommentReference
from docxref.member import Constructor
from docxref.model_element import ModelElement


def _is_private(r: CommentReferable) -> bool:
    return isinstance(r, ModelElement) and r.is_private


def reference_filter(ref: CommentReference, *, include_private: bool) -> ReferableFilter:
    """Build the result filter matching the spelling of ``ref``."""

    def accept(r: CommentReferable) -> bool:
        if not include_private and _is_private(r):
            return False
        if ref.wants_constructor and not isinstance(r, Constructor):
            return False
        if ref.wants_callable:
            return bool(getattr(r, "is_callable", False))
        return True

    return accept


def reference_allow_tree(*, include_private: bool) -> ReferableFilter:
    """Build the subtree filter: never descend into private entities."""

    def allow(r: CommentReferable) -> bool:
        return include_private or not _is_private(r)

    return allow
