"""
Command-line interface for the .NET Test Visualizer.

This module provides a subcommand-based CLI using Typer.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer

from dotnet_test_visualizer.core.config import Config
from dotnet_test_visualizer.core.errors import TestVisualizerError
from dotnet_test_visualizer.core.logging import setup_logger
from dotnet_test_visualizer.rendering.console import ConsoleRenderer
from dotnet_test_visualizer.xunit.reader import load_all

app = typer.Typer(
    name="dotnet-test-visualizer",
    help="Visualize .NET test results written in xUnit's v2+ XML format",
    add_completion=False,
)


def get_config(
    verbosity: Optional[int] = None,
    config_file: Optional[Path] = None,
    **kwargs
) -> Config:
    """Create Config from CLI values; None means 'not given'."""
    init_kwargs = {}
    if config_file:
        init_kwargs["config_file"] = config_file
    if verbosity is not None:
        init_kwargs["verbosity"] = verbosity
    for key, value in kwargs.items():
        if key in Config.__dataclass_fields__ and value is not None:
            init_kwargs[key] = value
    return Config(**init_kwargs)


def fail(message: str) -> None:
    """Echo an error and exit with status 1."""
    typer.echo(f"✗ {message}", err=True)
    sys.exit(1)


@app.command()
def show(
    files: List[Path] = typer.Argument(..., help="xUnit v2 XML result file(s)"),
    fast: Optional[float] = typer.Option(None, "--fast", help="Max duration (s) of a fast test"),
    normal: Optional[float] = typer.Option(None, "--normal", help="Max duration (s) of a normal test"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    no_header: bool = typer.Option(False, "--no-header", help="Don't print the banner"),
    flat: bool = typer.Option(False, "--flat", help="Only print tests that are not nested"),
    failures: bool = typer.Option(False, "--failures", help="Print the failure message of failed tests"),
    strict: bool = typer.Option(False, "--strict", help="Exit with status 1 when a test failed"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Configuration file (TOML)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write diagnostics to this file"),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
):
    """Print a grouped summary of the test results."""
    try:
        config = get_config(
            verbosity=verbosity,
            config_file=config_file,
            log_file=log_file,
            fast_threshold=fast,
            normal_threshold=normal,
            color=False if no_color else None,
            show_header=False if no_header else None,
            show_tree=False if flat else None,
            show_failures=True if failures else None,
        )
        setup_logger(verbosity=config.verbosity, log_file=config.log_file)
        results = load_all(files)
    except TestVisualizerError as e:
        fail(str(e))

    renderer = ConsoleRenderer(config)
    for result in results:
        renderer.render(result)

    if strict and any(assembly.failed for result in results for assembly in result.assemblies):
        sys.exit(1)


@app.command()
def traits(
    files: List[Path] = typer.Argument(..., help="xUnit v2 XML result file(s)"),
    per_collection: bool = typer.Option(False, "--per-collection", help="List traits per collection"),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
):
    """List the unique traits of each assembly."""
    try:
        config = get_config(verbosity=verbosity)
        setup_logger(verbosity=config.verbosity)
        results = load_all(files)
    except TestVisualizerError as e:
        fail(str(e))

    for result in results:
        for assembly in result.assemblies:
            typer.echo(f"Assembly: {assembly.short_name}")
            if per_collection:
                for collection in assembly.collections:
                    typer.echo(f"  Collection: {collection.name}")
                    for trait in collection.unique_traits():
                        typer.echo(f"    {trait.key}")
            else:
                for trait in assembly.unique_traits():
                    typer.echo(f"  {trait.key}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
