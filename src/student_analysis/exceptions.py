"""
Exception hierarchy for student-analysis.

Missing attributes and missing name elements are data states, not errors;
only unreadable markup and misuse of the context raise.
"""

from typing import Any, Optional


class StudentAnalysisError(Exception):
    """Base class for all errors raised by this package."""


class MalformedDocumentError(StudentAnalysisError, ValueError):
    """
    Document could not be parsed as well-formed XML.

    Raised identically by every strategy and by the faculty catalog.
    The original lxml error is available as ``__cause__``.

    Attributes:
        source: Path or handle of the offending document
    """

    def __init__(self, message: str, source: Optional[Any] = None):
        super().__init__(message)
        self.source = source


class NoStrategyBoundError(StudentAnalysisError, RuntimeError):
    """AnalysisContext executed before a strategy was set."""


class UnknownStrategyError(StudentAnalysisError, ValueError):
    """Strategy name not present in the registry."""
