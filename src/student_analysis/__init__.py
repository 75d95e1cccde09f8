"""
student-analysis: filter student names out of XML academic records.

Main package exports for user-facing API.
"""

from student_analysis.api import StudentAnalyzer
from student_analysis.context import AnalysisContext, NO_STRATEGY_MESSAGE
from student_analysis.documents import list_faculties
from student_analysis.exceptions import (
    StudentAnalysisError,
    MalformedDocumentError,
    NoStrategyBoundError,
    UnknownStrategyError,
)
from student_analysis.models import FilterCriteria
from student_analysis.strategies import (
    AnalysisStrategy,
    TreeStrategy,
    StreamStrategy,
    DeclarativeStrategy,
    available_strategies,
    create_strategy,
)

__all__ = [
    'StudentAnalyzer',
    'AnalysisContext',
    'NO_STRATEGY_MESSAGE',
    'FilterCriteria',
    'AnalysisStrategy',
    'TreeStrategy',
    'StreamStrategy',
    'DeclarativeStrategy',
    'available_strategies',
    'create_strategy',
    'list_faculties',
    'analyze_students',
    'StudentAnalysisError',
    'MalformedDocumentError',
    'NoStrategyBoundError',
    'UnknownStrategyError',
]


def analyze_students(
    xml_path,
    faculty=None,
    department=None,
    strategy=None
):
    """
    Filter student names from a document in one call.

    Criteria are taken literally: None means "no constraint" and any
    string, including '', must equal the attribute exactly. Use
    StudentAnalyzer for raw form input ('All', blank entries).

    Args:
        xml_path: Filesystem path or readable binary file object
        faculty: Exact Faculty attribute value, or None for any
        department: Exact Department attribute value, or None for any
        strategy: Strategy name or alias (default: settings.default_strategy)

    Returns:
        Names of matching records in document order

    Raises:
        MalformedDocumentError: If the document is not well-formed XML
        UnknownStrategyError: If the strategy name is not registered

    Example:
        >>> from student_analysis import analyze_students
        >>> analyze_students('students.xml', faculty='Eng', department='CS')
        ['A']
    """
    from student_analysis.config import get_settings

    settings = get_settings()
    context = AnalysisContext(create_strategy(strategy or settings.default_strategy, settings))
    return context.execute_strategy(
        xml_path,
        FilterCriteria(faculty=faculty, department=department)
    )
