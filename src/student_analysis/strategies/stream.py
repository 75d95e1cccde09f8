"""
Incremental stream strategy.

Walks the document once as start/end events (lxml iterparse) and keeps
state for a single record only. Each finished record is cleared from
the partial tree, so working memory stays bounded on large documents.
"""

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, List, Optional

from lxml import etree

from student_analysis.documents import element_text, parser_options
from student_analysis.models import FilterCriteria
from student_analysis.strategies.base import AnalysisStrategy

# Element depths: root container, records, record children
ROOT_DEPTH = 1
RECORD_DEPTH = 2
FIELD_DEPTH = 3


class StreamState(Enum):
    """Position of the parser relative to student records."""
    OUTSIDE = 'outside'
    INSIDE_RECORD = 'inside_record'


@dataclass
class RecordState:
    """
    Parse state for the record currently being read.

    ``name`` stays None until a name element closes, so a record without
    a name element is distinguishable from one with an empty name.
    """
    state: StreamState = StreamState.OUTSIDE
    faculty_match: bool = False
    department_match: bool = False
    name: Optional[str] = None

    @property
    def inside_record(self) -> bool:
        return self.state is StreamState.INSIDE_RECORD

    @property
    def matched(self) -> bool:
        return self.faculty_match and self.department_match

    @property
    def name_seen(self) -> bool:
        return self.name is not None

    def enter(self, faculty_match: bool, department_match: bool) -> None:
        """Record start: attributes are known from the opening tag."""
        self.state = StreamState.INSIDE_RECORD
        self.faculty_match = faculty_match
        self.department_match = department_match
        self.name = None

    def capture_name(self, text: str) -> None:
        # First name element wins
        if not self.name_seen:
            self.name = text

    def reset(self) -> None:
        self.state = StreamState.OUTSIDE
        self.faculty_match = False
        self.department_match = False
        self.name = None


class StreamStrategy(AnalysisStrategy):
    """
    Single forward pass over parser events with an explicit state machine.

    OUTSIDE --record start--> INSIDE_RECORD --record end--> OUTSIDE

    - record start: evaluate both criteria against the opening tag
    - name end (inside a record): capture the name text
    - record end: emit the name if both criteria matched, then reset
    """

    name = 'stream'

    def _collect_names(self, source: BinaryIO, criteria: FilterCriteria) -> List[str]:
        settings = self.settings
        results: List[str] = []
        record = RecordState()
        depth = 0
        root_accepted = False

        events = etree.iterparse(
            source,
            events=('start', 'end'),
            **parser_options(settings)
        )

        for event, elem in events:
            if event == 'start':
                depth += 1
                if depth == ROOT_DEPTH:
                    root_accepted = (
                        settings.root_tag is None or elem.tag == settings.root_tag
                    )
                elif (depth == RECORD_DEPTH and root_accepted
                        and elem.tag == settings.record_tag):
                    record.enter(
                        criteria.faculty_matches(elem.get(settings.faculty_attribute)),
                        criteria.department_matches(elem.get(settings.department_attribute))
                    )
                continue

            if record.inside_record:
                if depth == FIELD_DEPTH and elem.tag == settings.name_tag:
                    record.capture_name(element_text(elem))
                elif depth == RECORD_DEPTH:
                    self._finish_record(record, results)

            if depth == RECORD_DEPTH:
                self._release(elem)

            depth -= 1

        return results

    def _finish_record(self, record: RecordState, results: List[str]) -> None:
        if record.matched:
            name = self._result_name(record.name)
            if name is not None:
                results.append(name)
        record.reset()

    @staticmethod
    def _release(elem: etree._Element) -> None:
        """Drop a finished top-level child and any siblings before it."""
        elem.clear()
        parent = elem.getparent()
        while elem.getprevious() is not None:
            del parent[0]
