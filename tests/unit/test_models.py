"""
Unit tests for FilterCriteria.
"""

import pytest
from pydantic import ValidationError

from student_analysis.models import FilterCriteria


class TestFilterCriteria:
    """Exact-match semantics; None is "no constraint", '' is a value."""

    def test_defaults_are_unconstrained(self):
        criteria = FilterCriteria()

        assert criteria.faculty is None
        assert criteria.department is None
        assert criteria.is_empty

    def test_frozen(self):
        criteria = FilterCriteria(faculty='Eng')

        with pytest.raises(ValidationError):
            criteria.faculty = 'Sci'

    def test_hashable_and_comparable(self):
        assert FilterCriteria(faculty='Eng') == FilterCriteria(faculty='Eng')
        assert len({FilterCriteria(faculty='Eng'), FilterCriteria(faculty='Eng')}) == 1

    @pytest.mark.parametrize('faculty, department, expected', [
        ('Eng', 'CS', True),
        ('Eng', None, True),
        ('eng', 'CS', False),
        (None, 'CS', False),
        ('Eng ', 'CS', False),
    ])
    def test_matches_faculty_only(self, faculty, department, expected):
        assert FilterCriteria(faculty='Eng').matches(faculty, department) is expected

    def test_matches_both(self):
        criteria = FilterCriteria(faculty='Eng', department='CS')

        assert criteria.matches('Eng', 'CS')
        assert not criteria.matches('Eng', 'EE')
        assert not criteria.matches('Sci', 'CS')
        assert not criteria.matches('Eng', None)

    def test_empty_string_matches_only_empty_attribute(self):
        criteria = FilterCriteria(department='')

        assert criteria.department_matches('')
        assert not criteria.department_matches(None)
        assert not criteria.department_matches('CS')
        assert not criteria.is_empty

    def test_unconstrained_matches_missing_attributes(self):
        assert FilterCriteria().matches(None, None)


class TestFromUserInput:
    """Form values: 'All' and blanks become None."""

    def test_all_faculty(self):
        assert FilterCriteria.from_user_input('All', 'CS') == FilterCriteria(department='CS')

    def test_blank_values(self):
        assert FilterCriteria.from_user_input('', '  ').is_empty
        assert FilterCriteria.from_user_input(None, None).is_empty

    def test_values_kept_verbatim(self):
        criteria = FilterCriteria.from_user_input(' Eng', 'CS ')

        assert criteria.faculty == ' Eng'
        assert criteria.department == 'CS '

    def test_all_is_only_a_faculty_wildcard(self):
        """A department literally named 'All' is still a constraint."""
        assert FilterCriteria.from_user_input(None, 'All').department == 'All'

    def test_all_is_case_sensitive(self):
        assert FilterCriteria.from_user_input('all', None).faculty == 'all'
