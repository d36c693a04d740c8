"""
Core modules for the .NET Test Visualizer.
"""

from dotnet_test_visualizer.core.config import Config
from dotnet_test_visualizer.core.errors import (
    TestVisualizerError,
    ConfigurationError,
    ReportNotFoundError,
    ReportParseError,
    MalformedTestNameError,
)

__all__ = [
    "Config",
    "TestVisualizerError",
    "ConfigurationError",
    "ReportNotFoundError",
    "ReportParseError",
    "MalformedTestNameError",
]
