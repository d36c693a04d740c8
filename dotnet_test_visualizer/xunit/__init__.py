"""
xUnit v2 result model, reader and result tree construction.
"""

from dotnet_test_visualizer.xunit.models import (
    Assembly,
    Collection,
    Failure,
    TestOutcome,
    TestRecord,
    Trait,
    XunitResult,
)
from dotnet_test_visualizer.xunit.grouping import NO_TRAIT_KEY, GroupedForest, group_by_trait
from dotnet_test_visualizer.xunit.reader import load_results, parse_results
from dotnet_test_visualizer.xunit.traits import unique_traits
from dotnet_test_visualizer.xunit.tree import TreeNode, build_tree, walk

__all__ = [
    "Assembly",
    "Collection",
    "Failure",
    "TestOutcome",
    "TestRecord",
    "Trait",
    "XunitResult",
    "NO_TRAIT_KEY",
    "GroupedForest",
    "group_by_trait",
    "load_results",
    "parse_results",
    "unique_traits",
    "TreeNode",
    "build_tree",
    "walk",
]
