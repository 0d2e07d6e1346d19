"""Tests for hierarchy reconstruction."""
import unittest

from datasource_nodes.hierarchy import NodeHierarchy
from datasource_nodes.models.node import Node, NodeType


def folder(node_id, parents, timestamp=1):
    return Node.new("ds1", node_id, NodeType.FOLDER, timestamp, node_id.title(), "", parents)


def document(node_id, parents, timestamp=1):
    return Node.new(
        "ds1", node_id, NodeType.DOCUMENT, timestamp,
        f"{node_id}.txt", "text/plain", parents
    )


class TestNodeHierarchy(unittest.TestCase):
    """Tests for the NodeHierarchy class."""

    def setUp(self):
        """Set up test fixtures."""
        self.root = folder("root", [])
        self.team = folder("team", ["root"])
        self.notes = document("notes", ["team", "root"])
        self.budget = Node.new(
            "ds1", "budget", NodeType.TABLE, 1, "Budget", "text/csv", ["team", "root"]
        )
        self.readme = document("readme", ["root"])
        self.hierarchy = NodeHierarchy(
            [self.root, self.team, self.notes, self.budget, self.readme]
        )

    def test_roots(self):
        """Test nodes without parents are roots."""
        self.assertEqual(self.hierarchy.roots(), [self.root])
        self.assertEqual(len(self.hierarchy), 5)
        self.assertIn("notes", self.hierarchy)

    def test_children(self):
        """Test direct children follow the nearest parent only."""
        self.assertEqual(self.hierarchy.children_of("root"), [self.team, self.readme])
        self.assertEqual(self.hierarchy.children_of("team"), [self.notes, self.budget])
        self.assertEqual(self.hierarchy.children_of("notes"), [])

    def test_ancestors_and_path(self):
        """Test ancestors run from nearest parent to root."""
        self.assertEqual(self.hierarchy.ancestors(self.notes), [self.team, self.root])
        self.assertEqual(self.hierarchy.parent_of(self.notes), self.team)
        self.assertIsNone(self.hierarchy.parent_of(self.root))
        self.assertEqual(self.hierarchy.path(self.notes), ["Root", "Team", "notes.txt"])

    def test_descendants(self):
        """Test descendants are collected breadth first."""
        self.assertEqual(
            self.hierarchy.descendants("root"),
            [self.team, self.readme, self.notes, self.budget]
        )

    def test_missing_ancestors(self):
        """Test unknown parents are skipped and reported as orphans."""
        stray = document("stray", ["gone", "root"])
        hierarchy = NodeHierarchy([self.root, stray])

        self.assertEqual(hierarchy.ancestors(stray), [self.root])
        self.assertEqual(hierarchy.orphans(), [stray])
        self.assertIsNone(hierarchy.parent_of(stray))

    def test_self_reference_terminates(self):
        """Test a node listing itself as parent does not loop."""
        loop = folder("loop", ["loop"])
        hierarchy = NodeHierarchy([loop])

        self.assertEqual(hierarchy.ancestors(loop), [])
        self.assertEqual(hierarchy.descendants("loop"), [])

    def test_duplicate_keeps_newest(self):
        """Test the newest snapshot of a node wins."""
        newer = folder("team", ["root"], timestamp=5)
        hierarchy = NodeHierarchy([self.root, newer, self.team])

        self.assertEqual(hierarchy.get("team"), newer)
        self.assertEqual(hierarchy.children_of("root"), [newer])

    def test_duplicate_tie_keeps_later(self):
        """Test equal timestamps keep the later snapshot."""
        first = Node.new("ds1", "team", NodeType.FOLDER, 1, "Team", "", ["root"])
        second = Node.new("ds1", "team", NodeType.FOLDER, 1, "Team (renamed)", "", ["root"])
        hierarchy = NodeHierarchy([self.root, first, second])

        self.assertEqual(hierarchy.get("team"), second)
        self.assertEqual(hierarchy.children_of("root"), [second])
        self.assertEqual(len(hierarchy), 2)

    def test_descendants_of_wide_tree(self):
        """Test descendants over many siblings keep breadth first order."""
        children = [folder(f"f{i}", ["root"]) for i in range(500)]
        leaves = [document(f"d{i}", [f"f{i}", "root"]) for i in range(500)]
        hierarchy = NodeHierarchy([self.root, *children, *leaves])

        self.assertEqual(hierarchy.descendants("root"), children + leaves)

    def test_mixed_data_sources(self):
        """Test nodes from another data source are rejected."""
        other = Node.new("ds2", "x", NodeType.FOLDER, 1, "X", "", [])
        with self.assertRaises(ValueError):
            NodeHierarchy([self.root, other])
