"""
Pytest configuration for unit tests.

Provides sample documents and isolates settings for all unit tests.
"""

import os

import pytest

from student_analysis import config


SCENARIO_XML = """<?xml version="1.0" encoding="utf-8"?>
<University>
    <Student Faculty="Eng" Department="CS"><Name>A</Name><Age>20</Age></Student>
    <Student Faculty="Eng" Department="EE"><Name>B</Name><Age>21</Age></Student>
    <Student Faculty="Sci" Department="CS"><Name>C</Name><Age>22</Age></Student>
</University>
"""

# Edge cases in one document, in this order:
#  0 Eng/CS  'Ann'
#  1 Eng/--  empty <Name/>          (no Department attribute)
#  2 --/CS   'Bob'                  (no Faculty attribute)
#  3 eng/CS  'Cid'                  (lower-case faculty)
#  4 Eng/CS  no <Name> element
#  5 Sci/''  'Dee'                  (Department="")
#  6 Eng/EE  mixed-content name
#  7 Eng/CS  two <Name> elements, first wins
EDGE_CASES_XML = """<?xml version="1.0" encoding="utf-8"?>
<University>
    <Student Faculty="Eng" Department="CS"><Name>Ann</Name></Student>
    <Student Faculty="Eng"><Name/></Student>
    <!-- a comment between records -->
    <Student Department="CS"><Name>Bob</Name></Student>
    <Student Faculty="eng" Department="CS"><Name>Cid</Name></Student>
    <Student Faculty="Eng" Department="CS"><Age>20</Age></Student>
    <Teacher Faculty="Eng" Department="CS"><Name>Not a student</Name></Teacher>
    <Student Faculty="Sci" Department=""><Name>Dee</Name></Student>
    <Student Faculty="Eng" Department="EE"><Name>Eve <b>van</b> Dam</Name></Student>
    <Student Faculty="Eng" Department="CS"><Name>Fay</Name><Name>Other</Name></Student>
</University>
"""


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """
    Give every test fresh default settings.

    - drops the cached singleton
    - ignores any config/analysis.yaml on disk
    - clears STUDENT_ANALYSIS_* environment variables
    """
    for key in list(os.environ):
        if key.startswith('STUDENT_ANALYSIS_'):
            monkeypatch.delenv(key)

    monkeypatch.setattr(config, '_find_config_file', lambda: None)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def write_xml(tmp_path):
    """Factory writing XML text to a file under tmp_path."""
    def _write(content: str, filename: str = 'students.xml'):
        path = tmp_path / filename
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def scenario_xml(write_xml):
    """Three records: Eng/CS A, Eng/EE B, Sci/CS C."""
    return write_xml(SCENARIO_XML)


@pytest.fixture
def edge_cases_xml(write_xml):
    """Document covering missing attributes, empty and missing names."""
    return write_xml(EDGE_CASES_XML, 'edge_cases.xml')


@pytest.fixture
def malformed_xml(write_xml):
    """Truncated document (unclosed elements)."""
    return write_xml(
        '<University><Student Faculty="Eng"><Name>A</Name></Student><Student>',
        'malformed.xml'
    )


@pytest.fixture
def scenario_bytes():
    """Scenario document as UTF-8 bytes, for file-like inputs."""
    return SCENARIO_XML.encode('utf-8')
