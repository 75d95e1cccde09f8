"""
Pydantic models for request validation.
"""

from student_analysis.models.criteria import FilterCriteria

__all__ = [
    'FilterCriteria',
]
