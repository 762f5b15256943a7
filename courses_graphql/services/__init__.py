"""
Services Package
Relation resolution and health reporting over the record store
"""

from .relations import (
    RELATIONS,
    resolve_relation,
    student_for_course,
    grade_for_course,
    course_for_student,
    grade_for_student
)
from .health_service import HealthService

__all__ = [
    'RELATIONS',
    'resolve_relation',
    'student_for_course',
    'grade_for_course',
    'course_for_student',
    'grade_for_student',
    'HealthService'
]
