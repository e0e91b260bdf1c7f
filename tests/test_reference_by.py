import logging

from docxref.entity_kind import EntityKind
from docxref.reference_by import reference_by

from mock_referables import DictScope, Node


def build_lib_foo_bar():
    lib = Node("Lib", EntityKind.LIBRARY)
    foo = lib.add(Node("Foo", EntityKind.CONTAINER))
    bar = foo.add(Node("bar"))
    return lib, foo, bar


def test_lib_foo_bar_scenario() -> None:
    """Members, dotted paths and parent fallback on a minimal graph."""
    lib, foo, bar = build_lib_foo_bar()

    assert reference_by(foo, ["bar"]) is bar
    assert reference_by(lib, ["Foo", "bar"]) is bar
    assert reference_by(foo, ["nonexistent"]) is None


def test_empty_reference() -> None:
    """An empty reference is the origin itself only when parents are not tried."""
    lib, foo, _ = build_lib_foo_bar()
    assert reference_by(foo, []) is None
    assert reference_by(foo, [], try_parents=False) is foo


def test_resolution_is_deterministic() -> None:
    """Repeated lookups return the identical entity."""
    lib, _, bar = build_lib_foo_bar()
    results = {id(reference_by(lib, ["Foo", "bar"])) for _ in range(5)}
    assert results == {id(bar)}


def test_shortest_prefix_wins() -> None:
    """A one-segment child is preferred over a child whose name contains a dot."""
    origin = Node("origin")
    a = origin.add(Node("a"))
    via_a = a.add(Node("b"))
    origin.add(Node("a.b"))

    assert reference_by(origin, ["a", "b"]) is via_a


def test_longer_prefix_used_when_shorter_fails() -> None:
    """A dotted child name is found when the shorter split leads nowhere."""
    origin = Node("origin")
    origin.add(Node("a"))
    dotted = origin.add(Node("a.b"))

    assert reference_by(origin, ["a", "b"]) is dotted


def test_scope_is_searched_before_children() -> None:
    """The scope answer shadows a reference child of the same name."""
    from_scope = Node("x")
    origin = Node("origin", scope=DictScope({"x": from_scope}))
    origin.add(Node("x"))

    assert reference_by(origin, ["x"]) is from_scope


def test_children_used_when_scope_misses() -> None:
    """Verify that reference children are searched after a scope miss."""
    scope = DictScope()
    origin = Node("origin", scope=scope)
    child = origin.add(Node("x"))

    assert reference_by(origin, ["x"]) is child
    assert scope.calls == ["x"]


def test_parent_fallback() -> None:
    """A name the origin cannot resolve is looked up in its parents in order."""
    lib, foo, bar = build_lib_foo_bar()
    other = lib.add(Node("Other", EntityKind.CONTAINER))

    assert reference_by(other, ["Foo"]) is foo
    assert reference_by(other, ["Foo", "bar"]) is bar


def test_no_parent_fallback_when_disabled() -> None:
    """Verify that parents are not searched when try_parents is false."""
    lib, foo, _ = build_lib_foo_bar()
    other = lib.add(Node("Other", EntityKind.CONTAINER))

    assert reference_by(other, ["Foo"], try_parents=False) is None


def test_parent_overrides_replace_parents() -> None:
    """Explicit parent overrides are searched instead of the natural parents."""
    lib, foo, _ = build_lib_foo_bar()
    elsewhere = Node("Elsewhere")
    target = elsewhere.add(Node("target"))
    lib.add(Node("target"))

    assert reference_by(foo, ["target"], parent_overrides=[elsewhere]) is target


def test_filter_discards_result_and_search_continues() -> None:
    """A rejected hit in the origin lets a parent's hit through."""
    lib = Node("Lib", EntityKind.LIBRARY)
    foo = lib.add(Node("Foo", EntityKind.CONTAINER))
    foo.add(Node("x", EntityKind.PARAMETER))
    wanted = lib.add(Node("x", EntityKind.MEMBER))

    result = reference_by(foo, ["x"], filter_fn=lambda r: r.kind is EntityKind.MEMBER)
    assert result is wanted


def test_filter_redirect_to_same_named_child() -> None:
    """A filtered-out hit resolves to its own child of the same name."""
    lib = Node("Lib", EntityKind.LIBRARY)
    foo = lib.add(Node("Foo", EntityKind.CONTAINER))
    ctor = foo.add(Node("Foo", EntityKind.MEMBER))

    result = reference_by(lib, ["Foo"], filter_fn=lambda r: r.kind is EntityKind.MEMBER)
    assert result is ctor


def test_filter_applies_to_final_result_of_dotted_reference() -> None:
    """Verify that the filter also judges the end of a dotted reference."""
    lib, _, bar = build_lib_foo_bar()

    assert reference_by(lib, ["Foo", "bar"], filter_fn=lambda r: r is not bar) is None


def test_allow_tree_blocks_descent_only() -> None:
    """A refused subtree root is still returned when nothing remains to resolve."""
    lib = Node("Lib", EntityKind.LIBRARY)
    hidden = lib.add(Node("_Hidden", EntityKind.CONTAINER))
    hidden.add(Node("inner"))

    def not_hidden(r):
        return r is not hidden

    assert reference_by(lib, ["_Hidden", "inner"], allow_tree=not_hidden) is None
    assert reference_by(lib, ["_Hidden"], allow_tree=not_hidden) is hidden


def test_grandparent_override() -> None:
    """A failed lookup at the parent continues at its override, not its parents."""
    lib = Node("Lib", EntityKind.LIBRARY)
    declaring = lib.add(Node("Base", EntityKind.CONTAINER))
    inheriting = lib.add(Node("Derived", EntityKind.CONTAINER))
    from_declaring = declaring.add(Node("field"))
    inheriting.add(Node("field"))

    method = inheriting.add(Node("method"))
    method.grandparent_overrides = [declaring]
    param = method.add(Node("p", EntityKind.PARAMETER))

    assert reference_by(param, ["field"]) is from_declaring
    # The method itself still searches its natural parent.
    assert reference_by(method, ["field"]) is inheriting.children["field"]


def test_cycle_in_parents_terminates(caplog) -> None:
    """Mutually parented entities give up instead of recursing forever."""
    a = Node("a")
    b = Node("b")
    a.parents = [b]
    b.parents = [a]

    with caplog.at_level(logging.DEBUG, logger="docxref.reference_by"):
        assert reference_by(a, ["missing"]) is None
    assert "Cycle while resolving missing" in caplog.text


def test_self_referencing_scope_terminates() -> None:
    """A scope that hands back the origin cannot loop on the redirect."""
    scope = DictScope()
    origin = Node("loop", scope=scope)
    scope.entries["loop"] = origin

    result = reference_by(origin, ["loop"], filter_fn=lambda r: r is not origin)
    assert result is None


def test_method_delegates_to_function() -> None:
    """The referable method runs the same search as the free function."""
    lib, foo, bar = build_lib_foo_bar()
    assert lib.reference_by(["Foo", "bar"]) is bar
    assert foo.reference_by(["bar"], try_parents=False) is bar
