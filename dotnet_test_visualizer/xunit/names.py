"""
Parsing of fully qualified xUnit test names.

A test name is either a display name supplied by the test framework (it
contains a space) or a qualified name such as ``MyApp.Outer+Inner.Method``
where ``+`` separates a nested type from its enclosing type.
"""

from typing import List

from dotnet_test_visualizer.core.errors import MalformedTestNameError
from dotnet_test_visualizer.core.logging import get_logger

NESTING_DELIMITER = "+"
NAMESPACE_DELIMITER = "."

logger = get_logger(__name__)


def is_nested(name: str) -> bool:
    """Return True if name refers to a test inside a nested type."""
    return NESTING_DELIMITER in name


def has_display_name(name: str) -> bool:
    """Return True if name is a display name rather than a qualified name."""
    return " " in name


def short_name(name: str) -> str:
    """Return the method part of a qualified name (display names unchanged)."""
    if has_display_name(name):
        return name
    return name.rsplit(NAMESPACE_DELIMITER, 1)[-1]


def nesting_path(name: str, strict: bool = False) -> List[str]:
    """
    Return the nesting path of a nested test name.

    ``MyApp.Outer+Inner.Method`` gives ``["Outer", "Inner"]`` and
    ``MyApp.Outer+Middle+Inner.Method`` gives ``["Outer", "Middle", "Inner"]``.

    When the '.' expected before the first '+' or after the last '+' is
    missing, the whole substring on that side becomes the segment and a
    MalformedTestName warning is logged.

    Args:
        name: Qualified test name, must contain '+' and no space
        strict: Raise MalformedTestNameError instead of falling back

    Returns:
        One segment per nesting level
    """
    parts = name.split(NESTING_DELIMITER)
    head, middle, tail = parts[0], parts[1:-1], parts[-1]

    problems = []
    if NAMESPACE_DELIMITER not in head:
        problems.append(f"no '{NAMESPACE_DELIMITER}' before '{NESTING_DELIMITER}'")
    if NAMESPACE_DELIMITER not in tail:
        problems.append(f"no '{NAMESPACE_DELIMITER}' after '{NESTING_DELIMITER}'")

    if problems:
        error = MalformedTestNameError(name, ", ".join(problems))
        if strict:
            raise error
        logger.warning(f"{error}; using the whole substring as path segment")

    outer = head.rsplit(NAMESPACE_DELIMITER, 1)[-1]
    inner = tail.split(NAMESPACE_DELIMITER, 1)[0]
    return [outer, *middle, inner]
