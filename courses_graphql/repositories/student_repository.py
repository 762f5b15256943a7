"""
Student Repository
In-memory access to student records
"""

from typing import Dict

from .base_repository import BaseRepository


class StudentRepository(BaseRepository):
    """Repository for students"""

    kind = 'students'

    def create_student(self, name: str, lastname: str, course_id: int) -> Dict:
        """
        Create a student

        The course id is stored as given, it is not checked against courses.

        Args:
            name: First name
            lastname: Last name
            course_id: Id of the course the student attends

        Returns:
            Created student record
        """
        return self.create({
            'name': name,
            'lastname': lastname,
            'courseId': course_id
        })
