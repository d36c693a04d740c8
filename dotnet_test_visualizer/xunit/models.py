"""
Data models for xUnit v2 test results.

These are plain value types; ``reader.py`` maps the XML document onto them.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PureWindowsPath
from typing import List, Optional, Tuple

from dotnet_test_visualizer.utils.camelcase import friendly_name
from dotnet_test_visualizer.xunit import names
from dotnet_test_visualizer.xunit.grouping import GroupedForest, group_by_trait
from dotnet_test_visualizer.xunit.traits import unique_traits


class TestOutcome(Enum):
    """Outcome of a single test, as written in the ``result`` attribute."""
    PASS = "Pass"
    FAIL = "Fail"
    SKIP = "Skip"
    NOT_RUN = "NotRun"
    OTHER = "Other"

    @classmethod
    def from_result(cls, result: str) -> "TestOutcome":
        try:
            return cls(result)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Trait:
    """A (name, value) tag attached to a test."""
    name: str
    value: str

    @property
    def key(self) -> str:
        """Group key used when grouping tests by this trait."""
        return f"{self.name} - {self.value}"


@dataclass(frozen=True)
class Failure:
    """Details of a failed test."""
    exception_type: str = ""
    message: str = ""
    stack_trace: str = ""


@dataclass(frozen=True)
class TestRecord:
    """Individual test result."""
    name: str
    result: str
    time: float = 0.0  # seconds
    traits: Tuple[Trait, ...] = ()
    id: str = ""
    type: str = ""
    method: str = ""
    source_file: str = ""
    source_line: str = ""
    failure: Optional[Failure] = None
    output: str = ""
    reason: str = ""
    warnings: Tuple[str, ...] = ()

    @property
    def outcome(self) -> TestOutcome:
        return TestOutcome.from_result(self.result)

    @property
    def passed(self) -> bool:
        return self.outcome is TestOutcome.PASS

    @property
    def friendly_name(self) -> str:
        """Human readable test name.

        Display names supplied by the test framework are returned unchanged,
        otherwise the method name is split into words.
        """
        if names.has_display_name(self.name):
            return self.name
        return friendly_name(names.short_name(self.name))


@dataclass
class Collection:
    """Results of a single test collection."""
    name: str = ""
    id: str = ""
    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    not_run: int = 0
    time: float = 0.0
    tests: List[TestRecord] = field(default_factory=list)

    def unique_traits(self) -> List[Trait]:
        """Unique traits of the tests in this collection."""
        return unique_traits(self.tests)


@dataclass
class AssemblyError:
    """An error that happened outside the scope of a single test."""
    name: str = ""
    type: str = ""


@dataclass
class Assembly:
    """Results of a single test assembly."""
    name: str = ""
    config_file: str = ""
    environment: str = ""
    test_framework: str = ""
    target_framework: str = ""
    run_date: str = ""
    run_time: str = ""
    time: float = 0.0
    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0
    not_run: int = 0
    collections: List[Collection] = field(default_factory=list)
    error_set: List[AssemblyError] = field(default_factory=list)

    @property
    def short_name(self) -> str:
        """File name of the assembly, without its directory."""
        return PureWindowsPath(self.name).name if self.name else ""

    def tests(self) -> List[TestRecord]:
        """All tests of all collections, in document order."""
        return [test for collection in self.collections for test in collection.tests]

    def unique_traits(self) -> List[Trait]:
        """Unique traits across all collections of this assembly."""
        return unique_traits(self.tests())

    def group_by_trait(self) -> GroupedForest:
        """Build the GroupedForest for every test in this assembly."""
        return group_by_trait(self.tests())


@dataclass
class XunitResult:
    """A complete xUnit v2 results document."""
    computer: str = ""
    user: str = ""
    id: str = ""
    schema_version: str = ""
    start_rtf: str = ""
    finish_rtf: str = ""
    timestamp: str = ""
    assemblies: List[Assembly] = field(default_factory=list)
    source: str = ""  # path the document was read from

    @property
    def end_time(self) -> str:
        return self.finish_rtf or self.timestamp
