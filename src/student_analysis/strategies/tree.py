"""
Whole-document tree strategy.

Parses the full document into an lxml tree and selects records with a
single XPath query built from the active criteria. Memory grows with the
document; suited to small and medium documents.
"""

from typing import BinaryIO, Dict, List, Tuple

from student_analysis.documents import find_name_text, read_tree
from student_analysis.models import FilterCriteria
from student_analysis.strategies.base import AnalysisStrategy


class TreeStrategy(AnalysisStrategy):
    """
    Select records via a dynamically built XPath query.

    The query is the record path plus one attribute-equality predicate per
    present criterion, joined with 'and'. Criterion values are bound as
    XPath variables, so quotes in values cannot break the expression.

    Example:
        >>> TreeStrategy().build_query(FilterCriteria(faculty='Eng'))
        ('/*/Student[@Faculty=$faculty]', {'faculty': 'Eng'})
    """

    name = 'tree'

    def build_query(self, criteria: FilterCriteria) -> Tuple[str, Dict[str, str]]:
        """
        Build the XPath expression and its variable bindings.

        Returns:
            Tuple of (xpath, variables)
        """
        conditions = []
        variables: Dict[str, str] = {}

        if criteria.faculty is not None:
            conditions.append(f"@{self.settings.faculty_attribute}=$faculty")
            variables['faculty'] = criteria.faculty
        if criteria.department is not None:
            conditions.append(f"@{self.settings.department_attribute}=$department")
            variables['department'] = criteria.department

        xpath = self.settings.record_path
        if conditions:
            xpath += f"[{' and '.join(conditions)}]"

        return xpath, variables

    def _collect_names(self, source: BinaryIO, criteria: FilterCriteria) -> List[str]:
        tree = read_tree(source, self.settings)
        xpath, variables = self.build_query(criteria)

        results = []
        # XPath node-sets come back in document order
        for node in tree.xpath(xpath, **variables):
            name = self._result_name(find_name_text(node, self.settings))
            if name is not None:
                results.append(name)

        return results
