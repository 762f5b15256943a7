"""
Course Repository
In-memory access to course records
"""

from typing import Dict

from .base_repository import BaseRepository


class CourseRepository(BaseRepository):
    """Repository for courses"""

    kind = 'courses'

    def create_course(self, name: str, description: str) -> Dict:
        """
        Create a course

        Args:
            name: Course name
            description: Course description

        Returns:
            Created course record
        """
        return self.create({
            'name': name,
            'description': description
        })
