"""
Repositories Package
In-memory data access layer for courses, students and grades
"""

from .base_repository import BaseRepository
from .course_repository import CourseRepository
from .student_repository import StudentRepository
from .grade_repository import GradeRepository
from .record_store import RecordStore, SeedDataError

__all__ = [
    'BaseRepository',
    'CourseRepository',
    'StudentRepository',
    'GradeRepository',
    'RecordStore',
    'SeedDataError'
]
