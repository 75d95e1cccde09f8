"""
Unit tests for the high-level StudentAnalyzer, analyze_students() and the
strategy registry.
"""

import pytest

from student_analysis import analyze_students
from student_analysis.api import StudentAnalyzer
from student_analysis.config import AnalysisSettings
from student_analysis.context import AnalysisContext
from student_analysis.exceptions import UnknownStrategyError
from student_analysis.strategies import (
    DeclarativeStrategy,
    StreamStrategy,
    TreeStrategy,
    available_strategies,
    create_strategy,
)


class TestCreateStrategy:
    """Strategy registry lookups."""

    def test_available_strategies(self):
        assert available_strategies() == ['tree', 'stream', 'declarative']

    @pytest.mark.parametrize('name, expected_cls', [
        ('tree', TreeStrategy),
        ('stream', StreamStrategy),
        ('declarative', DeclarativeStrategy),
        ('DOM', TreeStrategy),
        ('SAX', StreamStrategy),
        ('LINQ', DeclarativeStrategy),
        ('  Stream ', StreamStrategy),
    ])
    def test_names_and_aliases(self, name, expected_cls):
        assert isinstance(create_strategy(name), expected_cls)

    def test_settings_passed_through(self):
        settings = AnalysisSettings(missing_name='skip')
        assert create_strategy('tree', settings).settings is settings

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownStrategyError, match="Available"):
            create_strategy('xslt')

    def test_unknown_name_is_value_error(self):
        with pytest.raises(ValueError):
            create_strategy('')


class TestStudentAnalyzer:
    """Raw user input -> criteria -> strategy -> names."""

    def test_all_faculty_means_no_constraint(self, scenario_xml):
        analyzer = StudentAnalyzer()
        assert analyzer.analyze(scenario_xml, faculty='All') == ['A', 'B', 'C']

    def test_blank_department_means_no_constraint(self, scenario_xml):
        analyzer = StudentAnalyzer()
        result = analyzer.analyze(scenario_xml, faculty='Eng', department='   ')
        assert result == ['A', 'B']

    @pytest.mark.parametrize('strategy', ['DOM', 'SAX', 'LINQ', None])
    def test_strategies_by_name(self, scenario_xml, strategy):
        analyzer = StudentAnalyzer()
        result = analyzer.analyze(
            scenario_xml, faculty='Eng', department='CS', strategy=strategy
        )
        assert result == ['A']

    def test_binds_strategy_into_context(self, scenario_xml):
        context = AnalysisContext()
        analyzer = StudentAnalyzer(context=context)

        analyzer.analyze(scenario_xml, strategy='stream')

        assert isinstance(context.strategy, StreamStrategy)

    def test_default_strategy_from_settings(self, scenario_xml):
        analyzer = StudentAnalyzer(settings=AnalysisSettings(default_strategy='LINQ'))

        analyzer.analyze(scenario_xml)

        assert isinstance(analyzer.context.strategy, DeclarativeStrategy)

    def test_unknown_strategy(self, scenario_xml):
        with pytest.raises(UnknownStrategyError):
            StudentAnalyzer().analyze(scenario_xml, strategy='xslt')

    def test_faculties(self, scenario_xml):
        analyzer = StudentAnalyzer()

        assert analyzer.faculties(scenario_xml) == ['Eng', 'Sci']
        assert analyzer.faculties(scenario_xml, include_all=True) == ['All', 'Eng', 'Sci']

    def test_picked_faculty_round_trip(self, edge_cases_xml):
        """Every faculty offered by the picker filters to a non-empty result."""
        analyzer = StudentAnalyzer()

        for faculty in analyzer.faculties(edge_cases_xml, include_all=True):
            assert analyzer.analyze(edge_cases_xml, faculty=faculty)


class TestAnalyzeStudents:
    """Top-level convenience function with literal criteria."""

    def test_scenario(self, scenario_xml):
        assert analyze_students(scenario_xml, faculty='Eng') == ['A', 'B']

    def test_empty_string_is_literal(self, edge_cases_xml):
        """Unlike StudentAnalyzer, '' is an exact-match constraint here."""
        assert analyze_students(edge_cases_xml, department='') == ['Dee']

    def test_default_strategy_from_environment(self, scenario_xml, monkeypatch):
        monkeypatch.setenv('STUDENT_ANALYSIS_DEFAULT_STRATEGY', 'nonexistent')

        with pytest.raises(UnknownStrategyError):
            analyze_students(scenario_xml)
