"""Logic for loading symbol files written by the analysis provider."""

import re
from pathlib import Path
from typing import Any

import yaml

from docxref.errors import SymbolFileError

YAML_MIME_PREFIX = "### YamlMime:"

BOOL_TAG = "tag:yaml.org,2002:bool"


class SymbolFileLoader(yaml.SafeLoader):
    """Safe loader reading only true/false as booleans.

    Symbol files use ``on`` as a key (the extended type of an extension),
    which YAML 1.1 would read as ``True``.
    """


SymbolFileLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
SymbolFileLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def strip_yaml_mime_header(text: str) -> str:
    """Remove a leading ``### YamlMime:...`` header line, if present."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def load_symbol_file(path: Path) -> dict[str, Any]:
    """Load and parse one library's symbol file."""
    raw = strip_yaml_mime_header(path.read_text(encoding="utf-8"))
    try:
        doc = yaml.load(raw, Loader=SymbolFileLoader)
    except yaml.YAMLError as e:
        msg = f"{path}: invalid YAML: {e}"
        raise SymbolFileError(msg) from e
    if doc is None:
        return {}
    if not isinstance(doc, dict):
        msg = f"{path}: expected a mapping at the top level"
        raise SymbolFileError(msg)
    return doc


def as_text(v: object) -> str:
    """Convert a value to a string, handling lists and None."""
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, list):
        return "\n".join(as_text(x) for x in v if as_text(x))
    return str(v).strip()
