"""
Trait deduplication.
"""

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from dotnet_test_visualizer.xunit.models import TestRecord, Trait


def unique_traits(tests: Iterable["TestRecord"]) -> List["Trait"]:
    """
    Return the distinct traits carried by tests.

    Traits are compared on (name, value), case-sensitive. The order is the
    order of first occurrence, scanning the tests in order and each test's
    traits in order.
    """
    seen = set()
    result = []
    for test in tests:
        for trait in test.traits:
            if trait not in seen:
                seen.add(trait)
                result.append(trait)
    return result


def has_trait_key(test: "TestRecord", key: str) -> bool:
    """Return True if test carries a trait whose group key is key."""
    return any(trait.key == key for trait in test.traits)
