"""
Utility modules for the .NET Test Visualizer.
"""

from dotnet_test_visualizer.utils.camelcase import split, friendly_name

__all__ = ["split", "friendly_name"]
