"""
Strategy context: binds one strategy and forwards analysis requests to it.

The bound strategy is the only state kept between calls. There is no
locking; callers sharing a context across threads must serialize
set_strategy() and execute_strategy() themselves.
"""

import logging
from typing import List, Optional

from student_analysis.documents import DocumentSource
from student_analysis.exceptions import NoStrategyBoundError
from student_analysis.models import FilterCriteria
from student_analysis.strategies import AnalysisStrategy

logger = logging.getLogger(__name__)

# Result returned by a non-strict context with no strategy bound
NO_STRATEGY_MESSAGE = "Error: Strategy not set."


class AnalysisContext:
    """
    Holder/dispatcher for a single analysis strategy.

    Args:
        strategy: Strategy to bind initially (optional)
        strict: If True (default), executing without a strategy raises
            NoStrategyBoundError. If False, it returns the one-element
            list [NO_STRATEGY_MESSAGE] instead, for callers that expect
            a non-throwing surface.

    Example:
        >>> context = AnalysisContext()
        >>> context.set_strategy(StreamStrategy())
        >>> context.execute_strategy('students.xml', FilterCriteria(faculty='Eng'))
        ['A', 'B']
    """

    def __init__(
        self,
        strategy: Optional[AnalysisStrategy] = None,
        strict: bool = True
    ):
        self._strategy = strategy
        self.strict = strict

    @property
    def strategy(self) -> Optional[AnalysisStrategy]:
        """Currently bound strategy, or None."""
        return self._strategy

    def set_strategy(self, strategy: AnalysisStrategy) -> None:
        """Bind a strategy, replacing any previous one."""
        logger.debug(f"Binding strategy {strategy!r} (was {self._strategy!r})")
        self._strategy = strategy

    def execute_strategy(
        self,
        xml_path: DocumentSource,
        criteria: Optional[FilterCriteria] = None
    ) -> List[str]:
        """
        Run the bound strategy.

        Args:
            xml_path: Filesystem path or readable binary file object
            criteria: Faculty/department constraints (None = no constraint)

        Returns:
            Names of matching records in document order

        Raises:
            NoStrategyBoundError: If no strategy is bound and strict is True
            MalformedDocumentError: If the document is not well-formed XML
        """
        if self._strategy is None:
            if not self.strict:
                logger.warning("No strategy bound, returning legacy error result")
                return [NO_STRATEGY_MESSAGE]

            error_msg = "No analysis strategy bound. Call set_strategy() first."
            logger.error(error_msg)
            raise NoStrategyBoundError(error_msg)

        return self._strategy.analyze(xml_path, criteria)
