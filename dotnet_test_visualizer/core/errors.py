"""
Custom exceptions for the .NET Test Visualizer.
"""


class TestVisualizerError(Exception):
    """Base exception for all .NET Test Visualizer errors."""
    pass


class ConfigurationError(TestVisualizerError):
    """Raised when configuration is invalid."""
    pass


class ReportNotFoundError(TestVisualizerError):
    """Raised when a test result file does not exist."""
    pass


class ReportParseError(TestVisualizerError):
    """Raised when a test result file is not a valid xUnit v2 document."""
    pass


class MalformedTestNameError(TestVisualizerError):
    """Raised when a nested test name lacks the expected '.' delimiters."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"MalformedTestName: '{name}' ({reason})")
        self.name = name
        self.reason = reason
