"""Logic for rewriting ``[reference]`` spans in comments to Markdown links."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxref.find_comment_references import CommentReference, find_comment_references
from docxref.markdown import md_code, md_link
from docxref.reference_filters import reference_allow_tree, reference_filter

if TYPE_CHECKING:
    from docxref.comment_referable import CommentReferable
    from docxref.model_element import ModelElement
    from docxref.reference_report import ReferenceReport


def resolve_comment_reference(
    origin: CommentReferable,
    ref: CommentReference,
    *,
    include_private: bool = False,
) -> CommentReferable | None:
    """Resolve ``ref`` as seen from the comment of ``origin``."""
    return origin.reference_by(
        ref.parts,
        filter_fn=reference_filter(ref, include_private=include_private),
        allow_tree=reference_allow_tree(include_private=include_private),
    )


class CommentLinker:
    """Rewrites references in comments, reporting the ones that do not resolve."""

    def __init__(
        self,
        *,
        include_private: bool = False,
        report: ReferenceReport | None = None,
    ) -> None:
        """Initialize the linker; ``report`` receives resolution outcomes."""
        self.include_private = include_private
        self.report = report

    def link(self, text: str, origin: ModelElement) -> str:
        """Rewrite every reference in ``text`` found in the comment of ``origin``.

        Resolved references become links; unresolved ones, and entities
        without a page, are left as inline code.
        """
        if not text:
            return ""
        out: list[str] = []
        pos = 0
        for ref in find_comment_references(text):
            out.append(text[pos : ref.start])
            out.append(self._render(ref, origin))
            pos = ref.end
        out.append(text[pos:])
        return "".join(out)

    def _render(self, ref: CommentReference, origin: ModelElement) -> str:
        target = resolve_comment_reference(
            origin, ref, include_private=self.include_private
        )
        if target is None:
            if self.report is not None:
                file = origin.element.file
                self.report.add_unresolved(origin.uid, ref.text, str(file or ""))
            return md_code(ref.text)
        if self.report is not None:
            self.report.add_resolved()
        href = target.href
        if not href:
            return md_code(ref.text)
        return md_link(ref.text, href)
