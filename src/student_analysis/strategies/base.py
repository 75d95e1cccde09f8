"""
Analysis strategy contract.

Design:
- Strategy Pattern: strategies are interchangeable
- Each strategy implements the same interface
- Callers (AnalysisContext) are agnostic to the traversal algorithm

All strategies must return identical results for identical inputs:
document order, exact case-sensitive attribute matching, and the
configured missing-name policy.
"""

import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, List, Optional

from lxml import etree

from student_analysis.config import AnalysisSettings, get_settings
from student_analysis.documents import (
    DocumentSource,
    describe_source,
    malformed_document,
    open_document,
)
from student_analysis.models import FilterCriteria

logger = logging.getLogger(__name__)


class AnalysisStrategy(ABC):
    """
    Abstract base class for record-filtering strategies.

    Subclasses implement _collect_names() against an open binary source;
    analyze() handles opening/closing the document, default criteria,
    error translation and logging.

    Args:
        settings: Document shape settings (defaults to get_settings())
    """

    #: Registry name, see student_analysis.strategies.create_strategy
    name: str = ''

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or get_settings()

    def analyze(
        self,
        xml_path: DocumentSource,
        criteria: Optional[FilterCriteria] = None
    ) -> List[str]:
        """
        Extract names of matching records in document order.

        Args:
            xml_path: Filesystem path or readable binary file object
            criteria: Faculty/department constraints (None = no constraint)

        Returns:
            New list of names, one per matching record

        Raises:
            MalformedDocumentError: If the document is not well-formed XML
            FileNotFoundError: If the path does not exist

        Example:
            >>> TreeStrategy().analyze('students.xml', FilterCriteria(faculty='Eng'))
            ['A', 'B']
        """
        if criteria is None:
            criteria = FilterCriteria()

        logger.debug(
            f"{type(self).__name__}: analyzing {describe_source(xml_path)} "
            f"(faculty={criteria.faculty!r}, department={criteria.department!r})"
        )

        with open_document(xml_path) as source:
            try:
                names = self._collect_names(source, criteria)
            except etree.XMLSyntaxError as e:
                raise malformed_document(xml_path, e) from e

        logger.debug(f"{type(self).__name__}: {len(names)} matching records")
        return names

    @abstractmethod
    def _collect_names(
        self,
        source: BinaryIO,
        criteria: FilterCriteria
    ) -> List[str]:
        """
        Traverse an open document and collect matching names.

        Args:
            source: Binary file object positioned at the document start
            criteria: Faculty/department constraints

        Returns:
            Names of matching records in document order
        """
        pass

    def _result_name(self, name_text: Optional[str]) -> Optional[str]:
        """
        Apply the missing-name policy.

        Returns:
            The name text, '' for a missing name element under the 'empty'
            policy, or None when the record contributes nothing
        """
        if name_text is not None:
            return name_text
        return None if self.settings.skip_missing_names else ''

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
