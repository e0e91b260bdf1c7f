from docxref.markdown import header_slug, md_code, md_codeblock, md_table
from docxref.page_paths import output_file_for_page, page_path_for, path_safe


def test_header_slug() -> None:
    """Verify anchor slugs and the fallback for empty names."""
    assert header_slug("Circle.unit") == "circle-unit"
    assert header_slug("  ") == "section"


def test_md_code_widens_fence() -> None:
    """Verify that code containing a backtick gets a wider fence."""
    assert md_code("x") == "`x`"
    assert md_code("a`b") == "`` a`b ``"


def test_md_codeblock_strips_trailing_whitespace() -> None:
    """Verify that trailing blank lines are removed from code blocks."""
    assert md_codeblock("dart", "int x;\n\n") == "```dart\nint x;\n```"


def test_md_table_escapes_pipes() -> None:
    """Verify that empty tables render nothing and cell pipes are escaped."""
    assert md_table(["A"], []) == ""
    assert md_table(["A", "B"], [["x|y", "z"]]) == "| A | B |\n| --- | --- |\n| x\\|y | z |"


def test_page_paths() -> None:
    """Verify page path sanitising for dotted and generic names."""
    assert path_safe("shapes.core") == "shapes-core"
    assert path_safe("Box<T>") == "Box"
    assert path_safe("...") == "Unknown"
    assert page_path_for("/api/", "shapes.core", "Circle") == "/api/shapes-core/Circle"


def test_output_file_for_page(tmp_path) -> None:
    """Verify that anchors are dropped and the folder is created."""
    out = output_file_for_page(tmp_path, "/api/shapes-core/Circle#radius")
    assert out == tmp_path / "api" / "shapes-core" / "Circle.md"
    assert out.parent.is_dir()
