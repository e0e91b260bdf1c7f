"""Logic for locating ``[reference]`` spans in documentation comments."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

# [Foo.bar] not preceded by "!" or "]" and not followed by "(", "[" or ":",
# which would make it an image, a Markdown link or a link definition.
REFERENCE_RE = re.compile(r"(?<![\]\\!])\[([^\[\]\n]+)\](?![\[(:])")
CODE_SPAN_RE = re.compile(r"(`+)(.+?)\1", re.DOTALL)
NAME_RE = re.compile(r"[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*")
GENERIC_ARGS_RE = re.compile(r"<[^<>]*>")


@dataclass(frozen=True)
class CommentReference:
    """A reference found in a comment, with the hints its spelling carries."""

    text: str  # as written between the brackets
    start: int  # offset of "[" in the comment
    end: int  # offset just past "]"
    name: str  # dotted name to resolve
    wants_constructor: bool = False  # written as [new Foo]
    wants_callable: bool = False  # written as [foo()]

    @property
    def parts(self) -> list[str]:
        return self.name.split(".")


def parse_reference_name(text: str) -> tuple[str, bool, bool] | None:
    """Normalize reference text to ``(name, wants_constructor, wants_callable)``.

    Returns None for bracketed text that is not a reference, like ``[1, 2]``.
    """
    s = text.strip()
    wants_constructor = s.startswith("new ")
    if wants_constructor:
        s = s[4:].strip()
    wants_callable = s.endswith("()")
    if wants_callable:
        s = s[:-2]
    # Drop generic arguments, innermost first: Map<K, List<V>> -> Map
    prev = None
    while prev != s:
        prev = s
        s = GENERIC_ARGS_RE.sub("", s)
    s = s.strip()
    if not NAME_RE.fullmatch(s):
        return None
    return s, wants_constructor, wants_callable


def find_comment_references(text: str) -> Iterator[CommentReference]:
    """Yield references in ``text`` outside code spans, in order."""
    code_spans = [(m.start(), m.end()) for m in CODE_SPAN_RE.finditer(text)]
    for m in REFERENCE_RE.finditer(text):
        if any(start <= m.start() < end for start, end in code_spans):
            continue
        parsed = parse_reference_name(m.group(1))
        if parsed is None:
            continue
        name, wants_constructor, wants_callable = parsed
        yield CommentReference(
            text=m.group(1),
            start=m.start(),
            end=m.end(),
            name=name,
            wants_constructor=wants_constructor,
            wants_callable=wants_callable,
        )
