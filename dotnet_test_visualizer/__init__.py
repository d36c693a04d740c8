"""
.NET Test Visualizer

Renders xUnit v2+ XML test results as a grouped, colorized console summary.
"""

__version__ = "0.1.0"

from dotnet_test_visualizer.core.config import Config
from dotnet_test_visualizer.xunit.grouping import GroupedForest, group_by_trait
from dotnet_test_visualizer.xunit.reader import load_results

__all__ = [
    "Config",
    "GroupedForest",
    "group_by_trait",
    "load_results",
]
