"""
Entry point for running dotnet_test_visualizer as a module.

Usage:
    python -m dotnet_test_visualizer [command] [options]
"""

from dotnet_test_visualizer.cli import main

if __name__ == "__main__":
    main()
