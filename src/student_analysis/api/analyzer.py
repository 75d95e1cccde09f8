"""
High-level analysis interface.

This module provides StudentAnalyzer, a one-call interface that takes raw
user input (picker/text-box values and a strategy name), normalizes it,
binds the requested strategy and runs it.
"""

import logging
from typing import List, Optional

from student_analysis.config import AnalysisSettings, get_settings
from student_analysis.context import AnalysisContext
from student_analysis.documents import DocumentSource, list_faculties
from student_analysis.models import FilterCriteria
from student_analysis.strategies import create_strategy
from student_analysis.validators import ALL_FACULTIES

logger = logging.getLogger(__name__)


class StudentAnalyzer:
    """
    High-level interface for filtering student names.

    Handles the common flow in one place:
    - 'All' / blank inputs mean "no constraint"
    - strategy chosen by name (falls back to settings.default_strategy)
    - results in document order

    Example:
        >>> analyzer = StudentAnalyzer()
        >>> analyzer.faculties('students.xml', include_all=True)
        ['All', 'Eng', 'Sci']
        >>> analyzer.analyze('students.xml', faculty='Eng', strategy='stream')
        ['A', 'B']
    """

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        context: Optional[AnalysisContext] = None
    ):
        """
        Initialize with optional injected settings and context.

        Args:
            settings: Settings for created strategies (defaults to get_settings())
            context: Context to bind strategies into (defaults to a strict one)
        """
        self.settings = settings or get_settings()
        self.context = context or AnalysisContext()

    def analyze(
        self,
        xml_path: DocumentSource,
        faculty: Optional[str] = None,
        department: Optional[str] = None,
        strategy: Optional[str] = None
    ) -> List[str]:
        """
        Filter student names from a document.

        Args:
            xml_path: Filesystem path or readable binary file object
            faculty: Faculty value; None, blank or 'All' for any faculty
            department: Department value; None or blank for any department
            strategy: Strategy name or alias (default: settings.default_strategy)

        Returns:
            Names of matching records in document order

        Raises:
            UnknownStrategyError: If the strategy name is not registered
            MalformedDocumentError: If the document is not well-formed XML
        """
        criteria = FilterCriteria.from_user_input(faculty, department)
        strategy_name = strategy or self.settings.default_strategy

        self.context.set_strategy(create_strategy(strategy_name, self.settings))

        logger.info(
            f"Analyzing with '{strategy_name}' strategy "
            f"(faculty={criteria.faculty!r}, department={criteria.department!r})"
        )
        return self.context.execute_strategy(xml_path, criteria)

    def faculties(
        self,
        xml_path: DocumentSource,
        include_all: bool = False
    ) -> List[str]:
        """
        Faculties present in a document, sorted.

        Args:
            xml_path: Filesystem path or readable binary file object
            include_all: Prepend the 'All' wildcard entry

        Returns:
            Sorted faculty names, optionally led by 'All'
        """
        faculties = list_faculties(xml_path, self.settings)
        if include_all:
            return [ALL_FACULTIES] + faculties
        return faculties
