import logging
from pathlib import Path

import pytest

from dotnet_test_visualizer.core.errors import ReportNotFoundError, ReportParseError
from dotnet_test_visualizer.xunit.models import TestOutcome, Trait
from dotnet_test_visualizer.xunit.reader import load_results, parse_results

RESULTS_XML = """<?xml version="1.0" encoding="utf-8"?>
<assemblies schema-version="3" id="run-1" computer="BUILD-01" user="ci"
            start-rtf="2023-05-01T10:00:00.0000000+00:00" timestamp="05/01/2023 10:00:01">
  <assembly name="C:\\src\\MyApp.Tests\\bin\\MyApp.Tests.dll" config-file="MyApp.Tests.dll.config"
            environment="64-bit .NET 7.0" test-framework="xUnit.net 2.4.2" target-framework=".NETCoreApp,Version=v7.0"
            run-date="2023-05-01" run-time="10:00:00" time="0.250" total="3" passed="2" failed="1"
            skipped="0" errors="0" not-run="0">
    <errors />
    <collection name="Test collection for MyApp.Tests.CalculatorTests" id="c1" total="3"
                passed="2" failed="1" skipped="0" not-run="0" time="0.120">
      <test name="MyApp.Tests.CalculatorTests+Add.ReturnsSum" type="MyApp.Tests.CalculatorTests+Add"
            method="ReturnsSum" time="0.0123" result="Pass" id="t1" source-file="CalculatorTests.cs" source-line="12">
        <traits>
          <trait name="Category" value="Unit" />
        </traits>
      </test>
      <test name="MyApp.Tests.CalculatorTests.DividesByZero" type="MyApp.Tests.CalculatorTests"
            method="DividesByZero" time="0.2" result="Fail" id="t2">
        <failure exception-type="System.DivideByZeroException">
          <message><![CDATA[Attempted to divide by zero.]]></message>
          <stack-trace><![CDATA[   at MyApp.Calculator.Divide()]]></stack-trace>
        </failure>
        <output>some output</output>
      </test>
      <test name="adds two numbers" type="MyApp.Tests.CalculatorTests" method="AddsTwoNumbers"
            time="not-a-number" result="Pass" id="t3" />
    </collection>
  </assembly>
</assemblies>
"""


def _write_results(base: Path, content: str = RESULTS_XML) -> Path:
    path = base / "results.xml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_results_reads_document_attributes(tmp_path: Path) -> None:
    result = load_results(_write_results(tmp_path))

    assert result.computer == "BUILD-01"
    assert result.user == "ci"
    assert result.schema_version == "3"
    assert result.end_time == "05/01/2023 10:00:01"
    assert result.source.endswith("results.xml")
    assert len(result.assemblies) == 1


def test_load_results_reads_assembly(tmp_path: Path) -> None:
    assembly = load_results(_write_results(tmp_path)).assemblies[0]

    assert assembly.short_name == "MyApp.Tests.dll"
    assert assembly.total == 3
    assert assembly.failed == 1
    assert assembly.time == pytest.approx(0.25)
    assert len(assembly.collections) == 1
    assert len(assembly.tests()) == 3


def test_load_results_reads_tests(tmp_path: Path) -> None:
    tests = load_results(_write_results(tmp_path)).assemblies[0].tests()

    nested, failed, display = tests
    assert nested.traits == (Trait("Category", "Unit"),)
    assert nested.time == pytest.approx(0.0123)
    assert nested.outcome is TestOutcome.PASS
    assert nested.source_line == "12"

    assert failed.outcome is TestOutcome.FAIL
    assert failed.failure.exception_type == "System.DivideByZeroException"
    assert failed.failure.message == "Attempted to divide by zero."
    assert failed.output == "some output"

    assert display.friendly_name == "adds two numbers"
    assert display.time == 0.0


def test_unknown_result_is_preserved() -> None:
    content = RESULTS_XML.replace('result="Fail"', 'result="Inconclusive"')
    test = parse_results(content).assemblies[0].tests()[1]
    assert test.result == "Inconclusive"
    assert test.outcome is TestOutcome.OTHER


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ReportNotFoundError):
        load_results(tmp_path / "missing.xml")


def test_invalid_xml_raises(tmp_path: Path) -> None:
    with pytest.raises(ReportParseError):
        load_results(_write_results(tmp_path, "<assemblies><assembly>"))


def test_wrong_root_element_raises() -> None:
    with pytest.raises(ReportParseError):
        parse_results("<testsuites />")


def test_negative_time_is_clamped_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    content = RESULTS_XML.replace('time="0.2"', 'time="-0.5"')
    with caplog.at_level(logging.WARNING, logger="dotnet_test_visualizer.xunit.reader"):
        test = parse_results(content).assemblies[0].tests()[1]
    assert test.time == 0.0
    assert "negative time='-0.5'" in caplog.text
