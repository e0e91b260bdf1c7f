from docxref.reference_children_lookup import ReferenceChildrenLookup, child_lookups


def test_child_lookups_shortest_prefix_first() -> None:
    """Every split point is a candidate, in ascending prefix length."""
    lookups = child_lookups(["a", "b", "c"])
    assert [(lk.lookup, lk.remaining) for lk in lookups] == [
        ("a", ["b", "c"]),
        ("a.b", ["c"]),
        ("a.b.c", []),
    ]


def test_single_segment_has_no_remainder() -> None:
    """Verify that a one-segment reference yields a single lookup."""
    assert child_lookups(["Foo"]) == [ReferenceChildrenLookup("Foo", [])]


def test_str_shows_full_reference() -> None:
    """Verify the log rendering of a lookup."""
    assert str(ReferenceChildrenLookup("a", ["b", "c"])) == "a (a.b.c)"
    assert str(ReferenceChildrenLookup("a")) == "a (a)"
