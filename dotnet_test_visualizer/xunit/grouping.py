"""
Grouping of tests by trait.
"""

from typing import TYPE_CHECKING, Dict, Iterator, List, Sequence, Tuple

from dotnet_test_visualizer.core.logging import get_logger
from dotnet_test_visualizer.xunit.traits import has_trait_key, unique_traits
from dotnet_test_visualizer.xunit.tree import TreeNode, build_tree

if TYPE_CHECKING:
    from dotnet_test_visualizer.xunit.models import TestRecord

NO_TRAIT_KEY = ""

logger = get_logger(__name__)


class GroupedForest:
    """
    Ordered mapping of group key to the root of that group's tree.

    Iteration follows insertion order: the no-trait group first, then one
    group per trait in first-seen order. Use sorted_items() for key order.
    """

    def __init__(self):
        self._groups: Dict[str, TreeNode] = {}

    def add(self, key: str, root: TreeNode) -> None:
        if key in self._groups:
            raise KeyError(f"duplicate group key: {key!r}")
        self._groups[key] = root

    def keys(self) -> List[str]:
        return list(self._groups)

    def items(self) -> List[Tuple[str, TreeNode]]:
        return list(self._groups.items())

    def sorted_items(self) -> List[Tuple[str, TreeNode]]:
        return sorted(self._groups.items(), key=lambda item: item[0])

    def __getitem__(self, key: str) -> TreeNode:
        return self._groups[key]

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"GroupedForest({self.keys()!r})"


def group_by_trait(tests: Sequence["TestRecord"]) -> GroupedForest:
    """
    Group tests by trait and build one tree per group.

    Tests without traits go to the group keyed "". A test with traits is
    placed in the group of every trait it carries and never in "".
    """
    forest = GroupedForest()
    forest.add(NO_TRAIT_KEY, build_tree(test for test in tests if not test.traits))

    for trait in unique_traits(tests):
        if trait.key in forest:
            # e.g. ("a - b", "c") and ("a", "b - c"), the first build covered both
            logger.warning(f"Traits with identical group key '{trait.key}' are merged")
            continue
        forest.add(trait.key, build_tree(test for test in tests if has_trait_key(test, trait.key)))

    logger.debug(f"Grouped {len(tests)} tests into {len(forest)} groups")
    return forest
