"""Small Markdown building blocks shared by the page renderers."""

import re


def header_slug(s: str) -> str:
    """Generate a GitHub-ish anchor slug: lower, hyphenate non-alnum."""
    s = re.sub(r"[^a-z0-9]+", "-", s.strip().lower())
    return s.strip("-") or "section"


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block."""
    return f"```{lang}\n{code.rstrip()}\n```"


def md_code(text: str) -> str:
    """Wrap ``text`` in an inline code span, widening the fence if needed."""
    fence = "``" if "`" in text else "`"
    pad = " " if fence == "``" else ""
    return f"{fence}{pad}{text}{pad}{fence}"


def md_link(title: str, target: str) -> str:
    """Generate an inline Markdown link."""
    return f"[{title}]({target})"


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table, or nothing when there are no rows."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    # Pipes inside cells would split columns.
    out.extend("| " + " | ".join(c.replace("|", "\\|") for c in r) + " |" for r in rows)
    return "\n".join(out)
