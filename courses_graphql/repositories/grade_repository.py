"""
Grade Repository
In-memory access to grade records
"""

from typing import Dict

from .base_repository import BaseRepository


class GradeRepository(BaseRepository):
    """Repository for grades"""

    kind = 'grades'

    def create_grade(self, course_id: int, student_id: int, grade: int) -> Dict:
        """
        Create a grade

        Neither referenced id is checked.

        Args:
            course_id: Id of the graded course
            student_id: Id of the graded student
            grade: Integer score

        Returns:
            Created grade record
        """
        return self.create({
            'courseId': course_id,
            'studentId': student_id,
            'grade': grade
        })
