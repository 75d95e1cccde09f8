"""
User-facing API interfaces for student-analysis.
"""

from student_analysis.api.analyzer import StudentAnalyzer

__all__ = [
    'StudentAnalyzer',
]
