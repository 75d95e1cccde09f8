"""
Declarative pipeline strategy.

Loads the tree, then chains lazy stages: every record, an optional
faculty filter, an optional department filter, and a projection to the
name text. Nothing is materialized until the final list is built, and
filtering never reorders, so document order is kept.
"""

from typing import BinaryIO, Callable, List, Optional

from lxml import etree

from student_analysis.documents import find_name_text, iter_records, read_tree
from student_analysis.models import FilterCriteria
from student_analysis.strategies.base import AnalysisStrategy


def attribute_equals(attribute: str, value: str) -> Callable[[etree._Element], bool]:
    """Predicate: element's attribute is present and exactly equals value."""
    def predicate(elem: etree._Element) -> bool:
        return elem.get(attribute) == value
    return predicate


class DeclarativeStrategy(AnalysisStrategy):
    """
    Compose filter predicates over the record stream.

    Serves as the baseline the other strategies are checked against.
    """

    name = 'declarative'

    def _collect_names(self, source: BinaryIO, criteria: FilterCriteria) -> List[str]:
        settings = self.settings
        tree = read_tree(source, settings)

        records = iter_records(tree, settings)
        if criteria.faculty is not None:
            records = filter(
                attribute_equals(settings.faculty_attribute, criteria.faculty),
                records
            )
        if criteria.department is not None:
            records = filter(
                attribute_equals(settings.department_attribute, criteria.department),
                records
            )

        names = (
            self._result_name(find_name_text(record, settings))
            for record in records
        )
        return [name for name in names if name is not None]
