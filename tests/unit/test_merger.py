"""Unit tests for path merging."""

import logging

import pytest

from bancor_sdk.core.types import PathNode, nodes_equal
from bancor_sdk.pathfinding.merger import collapse_cycles, merge_paths


def nodes(*ids):
    return [PathNode(node_id) for node_id in ids]


class TestMergePaths:
    """Test merge_paths."""

    @pytest.mark.parametrize("source, target", [
        ([], nodes("t2", "p2", "a")),
        (nodes("t1", "p1", "a"), []),
        ([], []),
    ])
    def test_empty_side_yields_empty_path(self, source, target):
        """A missing side leaves no route through the anchor."""
        assert merge_paths(source, target) == []

    def test_two_tokens_through_anchor(self):
        """T1-P1-A and T2-P2-A join at the anchor."""
        result = merge_paths(nodes("T1", "P1", "A"), nodes("T2", "P2", "A"))
        assert result == nodes("T1", "P1", "A", "P2", "T2")

    def test_anchor_only_paths(self):
        """Merging the anchor with itself gives the anchor."""
        assert merge_paths(nodes("A"), nodes("A")) == nodes("A")

    def test_identical_paths_collapse_to_single_node(self):
        """A token converted to itself needs no hop."""
        path = nodes("T1", "P1", "A")
        assert merge_paths(path, path) == nodes("T1")

    def test_source_is_anchor(self):
        """Anchor to token runs the target path backwards."""
        result = merge_paths(nodes("A"), nodes("T2", "P2", "A"))
        assert result == nodes("A", "P2", "T2")

    def test_target_is_anchor(self):
        """Token to anchor keeps the source path."""
        result = merge_paths(nodes("T1", "P1", "A"), nodes("A"))
        assert result == nodes("T1", "P1", "A")

    def test_shared_tail_appears_once(self):
        """Segment common to both sides is kept once, anchor excluded."""
        source = nodes("T1", "P1", "X", "P3", "A")
        target = nodes("T2", "P2", "X", "P3", "A")

        result = merge_paths(source, target)

        assert result == nodes("T1", "P1", "X", "P2", "T2")

    def test_loop_through_shared_token_is_removed(self):
        """Both sides cross X through different pools before the anchor."""
        source = nodes("T1", "P1", "X", "P2", "A")
        target = nodes("T2", "P3", "X", "P4", "A")

        result = merge_paths(source, target)

        assert result == nodes("T1", "P1", "X", "P3", "T2")

    def test_symbol_keyed_nodes(self):
        """Symbol-keyed nodes compare on both symbol and id."""
        anchor = PathNode("bntbntbntbnt", "BNT")
        source = [PathNode("eosio.token", "EOS"), PathNode("cnvrt1", "EOS"), anchor]
        target = [PathNode("dapp", "DAPP"), PathNode("cnvrt2", "DAPP"), anchor]

        result = merge_paths(source, target)

        assert result == source + [target[1], target[0]]

    def test_even_length_result_is_logged(self, caplog):
        """Broken alternation is reported, not repaired."""
        with caplog.at_level(logging.WARNING, logger="bancor_sdk.pathfinding.merger"):
            result = merge_paths(nodes("T1", "P1", "A"), nodes("P2", "A"))

        assert result == nodes("T1", "P1", "A", "P2")
        assert "even length" in caplog.text


class TestCollapseCycles:
    """Test collapse_cycles."""

    def test_same_parity_repeat_drops_interior(self):
        """Node at index 2 equal to index 6 removes indices 3 to 5."""
        path = nodes("T1", "P1", "X", "P2", "Y", "P3", "X", "P4", "T2")

        assert collapse_cycles(path) == nodes("T1", "P1", "X", "P4", "T2")

    def test_repeat_at_different_parity_is_kept(self):
        """Only same-parity positions are compared."""
        path = nodes("T1", "P1", "P1", "P2", "T2")

        assert collapse_cycles(path) == path

    def test_repeated_pool(self):
        """A pool visited twice also closes a loop."""
        path = nodes("T1", "P1", "X", "P2", "Y", "P1", "T2")

        assert collapse_cycles(path) == nodes("T1", "P1", "T2")

    def test_jumps_to_last_occurrence(self):
        path = nodes("T1", "P1", "X", "P2", "X", "P3", "X", "P4", "T2")

        assert collapse_cycles(path) == nodes("T1", "P1", "X", "P4", "T2")

    def test_no_loop(self):
        path = nodes("T1", "P1", "A", "P2", "T2")
        assert collapse_cycles(path) == path

    def test_empty(self):
        assert collapse_cycles([]) == []


def test_nodes_equal_distinguishes_tags():
    """Plain and symbol-keyed nodes with the same id differ."""
    assert nodes_equal(PathNode("abc"), PathNode("abc"))
    assert not nodes_equal(PathNode("abc"), PathNode("abc", "ABC"))
    assert not nodes_equal(PathNode("abc", "ABC"), PathNode("abc", "XYZ"))
