"""
Reader for xUnit v2 XML result files.

Maps the document format onto the plain types in ``models.py``. See
https://xunit.net/docs/format-xml-v2 for the format.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Union

from dotnet_test_visualizer.core.errors import ReportNotFoundError, ReportParseError
from dotnet_test_visualizer.core.logging import get_logger
from dotnet_test_visualizer.xunit.models import (
    Assembly,
    AssemblyError,
    Collection,
    Failure,
    TestRecord,
    Trait,
    XunitResult,
)

logger = get_logger(__name__)


def _float(element: ET.Element, attr: str) -> float:
    raw = element.get(attr)
    if not raw:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {attr}='{raw}' on <{element.tag}>")
        return 0.0
    if value < 0:
        logger.warning(f"Ignoring negative {attr}='{raw}' on <{element.tag}>")
        return 0.0
    return value


def _int(element: ET.Element, attr: str) -> int:
    raw = element.get(attr)
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {attr}='{raw}' on <{element.tag}>")
        return 0


def _text(element: Optional[ET.Element]) -> str:
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def _read_test(element: ET.Element) -> TestRecord:
    traits = tuple(
        Trait(name=trait.get("name", ""), value=trait.get("value", ""))
        for trait in element.findall("traits/trait")
    )

    failure = None
    failure_el = element.find("failure")
    if failure_el is not None:
        failure = Failure(
            exception_type=failure_el.get("exception-type", ""),
            message=_text(failure_el.find("message")),
            stack_trace=_text(failure_el.find("stack-trace")),
        )

    return TestRecord(
        name=element.get("name", ""),
        result=element.get("result", ""),
        time=_float(element, "time"),
        traits=traits,
        id=element.get("id", ""),
        type=element.get("type", ""),
        method=element.get("method", ""),
        source_file=element.get("source-file", ""),
        source_line=element.get("source-line", ""),
        failure=failure,
        output=_text(element.find("output")),
        reason=_text(element.find("reason")),
        warnings=tuple(_text(w) for w in element.findall("warnings/warning")),
    )


def _read_collection(element: ET.Element) -> Collection:
    return Collection(
        name=element.get("name", ""),
        id=element.get("id", ""),
        total=_int(element, "total"),
        passed=_int(element, "passed"),
        failed=_int(element, "failed"),
        skipped=_int(element, "skipped"),
        not_run=_int(element, "not-run"),
        time=_float(element, "time"),
        tests=[_read_test(test) for test in element.findall("test")],
    )


def _read_assembly(element: ET.Element) -> Assembly:
    return Assembly(
        name=element.get("name", ""),
        config_file=element.get("config-file", ""),
        environment=element.get("environment", ""),
        test_framework=element.get("test-framework", ""),
        target_framework=element.get("target-framework", ""),
        run_date=element.get("run-date", ""),
        run_time=element.get("run-time", ""),
        time=_float(element, "time"),
        total=_int(element, "total"),
        passed=_int(element, "passed"),
        failed=_int(element, "failed"),
        skipped=_int(element, "skipped"),
        errors=_int(element, "errors"),
        not_run=_int(element, "not-run"),
        collections=[_read_collection(c) for c in element.findall("collection")],
        error_set=[
            AssemblyError(name=e.get("name", ""), type=e.get("type", ""))
            for e in element.findall("errors/error")
        ],
    )


def parse_results(content: Union[str, bytes], source: str = "<string>") -> XunitResult:
    """
    Parse an xUnit v2 document.

    Raises:
        ReportParseError: If the content is not well-formed XML or the root
            element is not <assemblies>
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ReportParseError(f"Invalid XML in {source}: {e}") from e

    if root.tag != "assemblies":
        raise ReportParseError(
            f"{source} is not an xUnit v2 result file (root element <{root.tag}>, expected <assemblies>)"
        )

    return XunitResult(
        computer=root.get("computer", ""),
        user=root.get("user", ""),
        id=root.get("id", ""),
        schema_version=root.get("schema-version", ""),
        start_rtf=root.get("start-rtf", ""),
        finish_rtf=root.get("finish-rtf", ""),
        timestamp=root.get("timestamp", ""),
        assemblies=[_read_assembly(a) for a in root.findall("assembly")],
        source=source,
    )


def load_results(path: Path) -> XunitResult:
    """
    Load an xUnit v2 result file.

    Raises:
        ReportNotFoundError: If path does not exist
        ReportParseError: If the file cannot be read or parsed
    """
    path = Path(path)
    if not path.is_file():
        raise ReportNotFoundError(f"Test result file not found: {path}")

    try:
        content = path.read_bytes()
    except OSError as e:
        raise ReportParseError(f"Failed to read {path}: {e}") from e

    result = parse_results(content, source=str(path))
    logger.info(
        f"Loaded {path}: {len(result.assemblies)} assemblies, "
        f"{sum(len(a.tests()) for a in result.assemblies)} tests"
    )
    return result


def load_all(paths: List[Path]) -> List[XunitResult]:
    """Load every file in paths, in order."""
    return [load_results(path) for path in paths]
