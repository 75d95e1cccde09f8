"""
Filter criteria model for record filtering.

A criterion that is None places no constraint on its field. An empty
string is a real constraint: it only matches an attribute whose value
is exactly ''.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from student_analysis.validators import ALL_FACULTIES, normalize_user_choice


class FilterCriteria(BaseModel):
    """
    Optional faculty/department constraints for one analysis request.

    Attributes:
        faculty: Exact Faculty attribute value to keep, or None for any
        department: Exact Department attribute value to keep, or None for any

    Example:
        >>> criteria = FilterCriteria(faculty='Eng')
        >>> criteria.matches('Eng', None)
        True
        >>> criteria.matches('eng', 'CS')
        False
    """

    faculty: Optional[str] = Field(
        default=None,
        description="Faculty attribute value to match exactly (None = any)",
        examples=["Eng"]
    )

    department: Optional[str] = Field(
        default=None,
        description="Department attribute value to match exactly (None = any)",
        examples=["CS"]
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_user_input(
        cls,
        faculty: Optional[str] = None,
        department: Optional[str] = None
    ) -> 'FilterCriteria':
        """
        Build criteria from raw form values.

        A faculty of 'All' and blank values of either field mean
        "no constraint".

        Example:
            >>> FilterCriteria.from_user_input('All', '')
            FilterCriteria(faculty=None, department=None)
        """
        return cls(
            faculty=normalize_user_choice(faculty, wildcard=ALL_FACULTIES),
            department=normalize_user_choice(department)
        )

    @property
    def is_empty(self) -> bool:
        """True when neither field is constrained."""
        return self.faculty is None and self.department is None

    def faculty_matches(self, value: Optional[str]) -> bool:
        return self.faculty is None or value == self.faculty

    def department_matches(self, value: Optional[str]) -> bool:
        return self.department is None or value == self.department

    def matches(self, faculty: Optional[str], department: Optional[str]) -> bool:
        """
        Check a record's attribute values against both criteria.

        Args:
            faculty: Record's Faculty attribute (None if absent)
            department: Record's Department attribute (None if absent)

        Returns:
            True if every present criterion equals the attribute exactly
        """
        return self.faculty_matches(faculty) and self.department_matches(department)
