"""
Result tree construction.

Tests are placed in a tree that mirrors the nested types encoded in their
qualified names. Tests that are not nested, or that carry a display name,
are attached to the root.
"""

from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Tuple

from dotnet_test_visualizer.xunit import names

if TYPE_CHECKING:
    from dotnet_test_visualizer.xunit.models import TestRecord


class TreeNode:
    """A node of the result tree, one per nesting path segment."""

    def __init__(self, name: str = ""):
        self.name = name
        self.tests: List["TestRecord"] = []
        self.children: List["TreeNode"] = []
        self._index: Dict[str, "TreeNode"] = {}

    def child(self, name: str) -> "TreeNode":
        """Return the child labelled name, creating it if needed."""
        node = self._index.get(name)
        if node is None:
            node = TreeNode(name)
            self._index[name] = node
            self.children.append(node)
        return node

    def find(self, path: Iterable[str]) -> "TreeNode":
        """Return the node at path below this node; KeyError if missing."""
        node = self
        for segment in path:
            node = node._index[segment]
        return node

    def count(self) -> int:
        """Number of tests in this subtree."""
        return sum(len(node.tests) for _, node in walk(self))

    def failed_count(self) -> int:
        """Number of tests in this subtree that did not pass."""
        return sum(1 for _, node in walk(self) for test in node.tests if not test.passed)

    def __repr__(self) -> str:
        return f"TreeNode(name={self.name!r}, tests={len(self.tests)}, children={len(self.children)})"


def build_tree(tests: Iterable["TestRecord"]) -> TreeNode:
    """
    Build the result tree for tests, processed in input order.

    Display names and non-nested names attach to the root. Nested names
    descend through their nesting path, creating nodes on first encounter,
    and attach to the deepest node only.
    """
    root = TreeNode()

    for test in tests:
        if names.has_display_name(test.name) or not names.is_nested(test.name):
            root.tests.append(test)
            continue

        node = root
        for segment in names.nesting_path(test.name):
            node = node.child(segment)
        node.tests.append(test)

    return root


def walk(root: TreeNode) -> Iterator[Tuple[int, TreeNode]]:
    """Yield (depth, node) pairs depth-first, pre-order, children in insertion order."""
    stack = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        stack.extend((depth + 1, child) for child in reversed(node.children))
