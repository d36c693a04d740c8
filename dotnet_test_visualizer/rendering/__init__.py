"""
Output rendering for the .NET Test Visualizer.
"""

from dotnet_test_visualizer.rendering.console import ConsoleRenderer

__all__ = ["ConsoleRenderer"]
