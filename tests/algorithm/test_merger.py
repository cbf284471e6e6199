"""Tests for TreeMerger.

Covers base-order preservation, name matching at every depth, list-append for
new siblings, collapsing of same-named leaves, duplicate overlay names,
identity with an empty overlay, non-commutativity, input immutability and
agreement with the straightforward recursive definition.
"""

from __future__ import annotations

import pytest

from nccl.algorithm.merger import TreeMerger
from nccl.api import parse
from nccl.tree.nodes import Node

# ---------------------------------------------------------------------------
# Fixtures and helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def merger() -> TreeMerger:
    return TreeMerger()


def _shape(node: Node) -> list[tuple[int, str]]:
    """Pre-order (depth, name) listing; unlike ==, sensitive to child order."""
    return [(depth, n.name) for depth, n in node.walk()]


def _recursive_merge(base: Node, overlay: Node) -> Node:
    """Direct recursive transcription of the merge rule, used as an oracle."""
    children = list(base.children)
    for b in overlay.children:
        for i, c in enumerate(children):
            if c.name == b.name:
                children[i] = _recursive_merge(c, b)
                break
        else:
            children.append(b)
    return Node(base.name, tuple(children))


FIRST = """\
hello
    world
        panama
    friends
        doggos
"""

SECOND = """\
hello
    world
        alaska
        neighbor
    friends
        John
        Alex
"""

PAIRS = [
    ("", ""),
    ("a\n", ""),
    ("", "a\n"),
    ("a\n  b\n", "a\n  b\n"),
    ("a\n  b\n  b\n", "a\n  b\n    c\n"),
    ("a\n  x\n", "a\n  y\na\n  z\n"),
    ("k\n  v\n", "k\n  v\n  v\n  w\n"),
    ("a\n  b\n    c\n      d\n", "a\n  b\n    e\n  f\n    c\n"),
    (
        "sandwich\n  meat\n    bologna\n  cheese\n    cheddar\n",
        "sandwich\n  meat\n    ham\n  bread\n    rye\nsub\n",
    ),
]


# ---------------------------------------------------------------------------
# Scenario
# ---------------------------------------------------------------------------


class TestHelloWorldScenario:
    def test_world_children(self, merger: TreeMerger) -> None:
        merged = merger.merge(parse(FIRST), parse(SECOND))
        assert list(merged["hello"]["world"].values()) == ["panama", "alaska", "neighbor"]

    def test_friends_children(self, merger: TreeMerger) -> None:
        merged = merger.merge(parse(FIRST), parse(SECOND))
        assert list(merged["hello"]["friends"].values()) == ["doggos", "John", "Alex"]

    def test_single_hello(self, merger: TreeMerger) -> None:
        merged = merger.merge(parse(FIRST), parse(SECOND))
        assert [c.name for c in merged.children] == ["hello"]
        assert list(merged["hello"].values()) == ["world", "friends"]


# ---------------------------------------------------------------------------
# Semantics
# ---------------------------------------------------------------------------


class TestSemantics:
    def test_shared_key_children_appended_in_order(self, merger: TreeMerger) -> None:
        base = Node.of("", Node.of("k", "a1", "a2"))
        overlay = Node.of("", Node.of("k", "b1", "b2"))
        merged = merger.merge(base, overlay)
        assert len(merged.children) == 1
        assert list(merged["k"].values()) == ["a1", "a2", "b1", "b2"]

    def test_same_named_leaves_collapse(self, merger: TreeMerger) -> None:
        merged = merger.merge(parse("port\n  80\n"), parse("port\n  80\n  443\n"))
        assert list(merged["port"].values()) == ["80", "443"]

    def test_new_top_level_nodes_appended(self, merger: TreeMerger) -> None:
        merged = merger.merge(parse("a\nb\n"), parse("c\na\n"))
        assert [c.name for c in merged.children] == ["a", "b", "c"]

    def test_matching_is_case_sensitive(self, merger: TreeMerger) -> None:
        merged = merger.merge(parse("Key\n"), parse("key\n"))
        assert [c.name for c in merged.children] == ["Key", "key"]

    def test_matches_first_of_duplicate_base_names(self, merger: TreeMerger) -> None:
        base = Node.of("", Node.of("a", "1"), Node.of("a", "2"))
        merged = merger.merge(base, Node.of("", Node.of("a", "3")))
        assert [list(c.values()) for c in merged.children] == [["1", "3"], ["2"]]

    def test_duplicate_overlay_names_merge_into_one(self, merger: TreeMerger) -> None:
        overlay = Node.of("", Node.of("a", "x"), Node.of("a", "y"))
        merged = merger.merge(Node(""), overlay)
        assert [c.name for c in merged.children] == ["a"]
        assert list(merged["a"].values()) == ["x", "y"]

    def test_deep_match_threads_into_base(self, merger: TreeMerger) -> None:
        base = parse("a\n  b\n    c\n      d\n")
        overlay = parse("a\n  b\n    c\n      e\n")
        merged = merger.merge(base, overlay)
        assert list(merged["a"]["b"]["c"].values()) == ["d", "e"]

    def test_overlay_subtree_copied_whole(self, merger: TreeMerger) -> None:
        overlay = parse("new\n  x\n    y\n")
        merged = merger.merge(parse("old\n"), overlay)
        assert merged["new"] == overlay["new"]

    def test_result_root_named_like_base(self, merger: TreeMerger) -> None:
        assert merger.merge(Node("base"), Node("overlay")).name == "base"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize(("first", "second"), PAIRS)
    def test_identity_with_empty_overlay(self, merger: TreeMerger, first: str, second: str) -> None:
        for text in (first, second):
            tree = parse(text)
            merged = merger.merge(tree, Node(""))
            assert merged == tree
            assert _shape(merged) == _shape(tree)

    @pytest.mark.parametrize(("first", "second"), PAIRS)
    def test_matches_recursive_definition(
        self, merger: TreeMerger, first: str, second: str
    ) -> None:
        base, overlay = parse(first), parse(second)
        assert _shape(merger.merge(base, overlay)) == _shape(_recursive_merge(base, overlay))

    @pytest.mark.parametrize(("first", "second"), PAIRS)
    def test_inputs_not_mutated(self, merger: TreeMerger, first: str, second: str) -> None:
        base, overlay = parse(first), parse(second)
        base_shape, overlay_shape = _shape(base), _shape(overlay)
        merger.merge(base, overlay)
        assert _shape(base) == base_shape
        assert _shape(overlay) == overlay_shape

    def test_not_commutative(self, merger: TreeMerger) -> None:
        a, b = parse("k\n  1\n"), parse("k\n  2\n")
        assert list(merger.merge(a, b)["k"].values()) == ["1", "2"]
        assert list(merger.merge(b, a)["k"].values()) == ["2", "1"]

    def test_disjoint_children_under_shared_key(self, merger: TreeMerger) -> None:
        a = parse("k\n  a\n  b\nother\n")
        b = parse("k\n  c\n  d\n")
        merged = merger.merge(a, b)
        assert [c.name for c in merged.children].count("k") == 1
        assert list(merged["k"].values()) == ["a", "b", "c", "d"]

    def test_deep_merge_without_recursion_error(self, merger: TreeMerger) -> None:
        depth = 5_000
        base = parse("".join("\t" * i + f"n{i}\n" for i in range(depth)))
        overlay = parse("".join("\t" * i + f"n{i}\n" for i in range(depth)) + "\t" * depth + "tip\n")
        merged = merger.merge(base, overlay)
        level, node = max(merged.walk(), key=lambda item: item[0])
        assert level == depth + 1
        assert node.name == "tip"
