"""
Console rendering of xUnit results.
"""

from typing import Callable, List, Optional

import typer

from dotnet_test_visualizer.core.config import Config
from dotnet_test_visualizer.utils.camelcase import friendly_name
from dotnet_test_visualizer.xunit.grouping import NO_TRAIT_KEY, GroupedForest
from dotnet_test_visualizer.xunit.models import Assembly, TestOutcome, TestRecord, XunitResult
from dotnet_test_visualizer.xunit.tree import TreeNode, walk

BANNER = [
    "    _  _ ___ _____   _____       _    __   ___              _ _            ",
    "   | \\| | __|_   _| |_   _|__ __| |_  \\ \\ / (_)____  _ __ _| (_)______ _ _ ",
    "  _| .` | _|  | |     | |/ -_|_-<  _|  \\ V /| (_-< || / _` | | |_ / -_) '_|",
    " (_)_|\\_|___| |_|     |_|\\___/__/\\__|   \\_/ |_/__/\\_,_\\__,_|_|_/__\\___|_|  ",
]

INDENT = "  "


class ConsoleRenderer:
    """Render xUnit results as a grouped, colored console summary."""

    def __init__(self, config: Config, echo: Optional[Callable[[str], None]] = None):
        self.config = config
        self.echo = echo or typer.echo

    def _style(self, text: str, fg: str, bold: bool = True) -> str:
        if not self.config.color:
            return text
        return typer.style(text, fg=fg, bold=bold)

    def status_glyph(self, test: TestRecord) -> str:
        outcome = test.outcome
        if outcome is TestOutcome.PASS:
            return self._style("✓", typer.colors.GREEN)
        if outcome is TestOutcome.SKIP:
            return self._style("⊘", typer.colors.YELLOW)
        return self._style("⛌", typer.colors.RED)

    def format_test(self, test: TestRecord, indent: str) -> List[str]:
        marker = self.config.marker_for(test.time)
        lines = [
            f"{indent}{marker} {self.status_glyph(test)} {test.friendly_name} ({test.time:g} seconds)"
        ]
        if self.config.show_failures and test.failure is not None and test.failure.message:
            for message_line in test.failure.message.splitlines():
                lines.append(f"{indent}{INDENT}{INDENT}{self._style(message_line, typer.colors.RED, bold=False)}")
        return lines

    def format_tree(self, root: TreeNode, indent: str) -> List[str]:
        """Format a group's tree, pre-order, one indent level per depth."""
        lines = []
        for depth, node in walk(root):
            if depth > 0 and not self.config.show_tree:
                break
            node_indent = indent + INDENT * depth
            if depth > 0:
                lines.append(f"{indent}{INDENT * (depth - 1)}{friendly_name(node.name)}.")
            for test in node.tests:
                lines.extend(self.format_test(test, node_indent))
        return lines

    def format_forest(self, forest: GroupedForest) -> List[str]:
        lines = []
        items = forest.sorted_items() if self.config.sort_groups else forest.items()
        for key, root in items:
            indent = INDENT
            if key != NO_TRAIT_KEY:
                lines.append(f"{INDENT}Trait: {key}")
                indent += INDENT
            lines.extend(self.format_tree(root, indent))
        return lines

    def format_assembly(self, assembly: Assembly) -> List[str]:
        if assembly.failed:
            verdict = self._style(
                f"⛌ Failed ({assembly.failed} of {assembly.total} failed).", typer.colors.RED
            )
        else:
            verdict = self._style(
                f"✓ Passed ({assembly.passed} of {assembly.total} passed).", typer.colors.GREEN
            )

        lines = [
            "",
            f"Assembly:         {assembly.short_name} - {verdict}",
            f"Date / time:      {assembly.run_date} {assembly.run_time}",
            f"Total time:       {assembly.time:g} seconds.",
            "",
            f"  # tests:         {assembly.total}",
            f"  # Passed tests:  {assembly.passed}",
            f"  # Failed tests:  {assembly.failed}",
            f"  # Skipped tests: {assembly.skipped}",
            f"  # Errors:        {assembly.errors}",
            "",
        ]
        for error in assembly.error_set:
            lines.append(self._style(f"  Error: {error.type} {error.name}", typer.colors.RED))
        lines.extend(self.format_forest(assembly.group_by_trait()))
        return lines

    def format_result(self, result: XunitResult) -> List[str]:
        lines = list(BANNER) if self.config.show_header else []
        lines.append("")
        lines.append(f"Amount of assemblies: {len(result.assemblies)}")
        if result.computer:
            lines.append(f"Computer:             {result.computer}")
        if result.user:
            lines.append(f"User:                 {result.user}")
        if result.start_rtf:
            lines.append(f"Start time:           {result.start_rtf}")
        if result.end_time:
            lines.append(f"End time:             {result.end_time}")

        for assembly in result.assemblies:
            lines.extend(self.format_assembly(assembly))
        lines.append("")
        return lines

    def render(self, result: XunitResult) -> None:
        """Echo the summary of result."""
        for line in self.format_result(result):
            self.echo(line)
