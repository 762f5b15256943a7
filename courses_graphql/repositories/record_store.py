"""
Record Store
Process-wide owner of the course, student and grade collections
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..config.logger import LoggerMixin, get_logger
from .base_repository import BaseRepository, Predicate, Record
from .course_repository import CourseRepository
from .grade_repository import GradeRepository
from .student_repository import StudentRepository

logger = get_logger(__name__)

SEED_FILES = {
    'courses': 'courses.json',
    'students': 'students.json',
    'grades': 'grades.json',
}

REQUIRED_FIELDS = {
    'courses': ('id', 'name', 'description'),
    'students': ('id', 'name', 'lastname', 'courseId'),
    'grades': ('id', 'courseId', 'studentId', 'grade'),
}


class SeedDataError(Exception):
    """Raised when a seed file is missing or malformed"""


class RecordStore(LoggerMixin):
    """
    Holds one repository per record kind

    The store is created once per application and handed to resolvers
    through the request context.
    """

    def __init__(
        self,
        courses: CourseRepository,
        students: StudentRepository,
        grades: GradeRepository
    ):
        self.courses = courses
        self.students = students
        self.grades = grades
        self._repositories: Dict[str, BaseRepository] = {
            'courses': courses,
            'students': students,
            'grades': grades,
        }

    @classmethod
    def from_records(
        cls,
        courses: Optional[List[Record]] = None,
        students: Optional[List[Record]] = None,
        grades: Optional[List[Record]] = None,
        id_strategy: str = 'sequence'
    ) -> 'RecordStore':
        """Build a store from in-memory record lists"""
        return cls(
            CourseRepository(courses, id_strategy),
            StudentRepository(students, id_strategy),
            GradeRepository(grades, id_strategy)
        )

    @classmethod
    def from_seed_dir(cls, seed_dir: Union[str, Path], id_strategy: str = 'sequence') -> 'RecordStore':
        """
        Load the three collections from JSON seed files

        Args:
            seed_dir: Directory containing courses.json, students.json and grades.json
            id_strategy: Identifier allocation strategy for every repository

        Returns:
            RecordStore instance

        Raises:
            SeedDataError: if a file is missing, unreadable, not a list of objects
                or a record lacks one of its kind's REQUIRED_FIELDS
        """
        seed_dir = Path(seed_dir)
        try:
            loaded = {
                kind: _load_seed_file(seed_dir / filename, REQUIRED_FIELDS[kind])
                for kind, filename in SEED_FILES.items()
            }
        except SeedDataError as e:
            logger.error(f"Seed data rejected: {e}")
            raise

        store = cls.from_records(id_strategy=id_strategy, **loaded)
        store.log_info(f"Loaded seed data from {seed_dir}: {store.counts()}")
        return store

    def repository(self, kind: str) -> BaseRepository:
        """
        Get the repository for a record kind

        Raises:
            KeyError: for an unknown kind
        """
        try:
            return self._repositories[kind]
        except KeyError:
            raise KeyError(f"Unknown record kind: {kind!r}") from None

    def list_all(self, kind: str) -> List[Record]:
        return self.repository(kind).list_all()

    def find_by_id(self, kind: str, id: Any) -> Optional[Record]:
        return self.repository(kind).find_by_id(id)

    def append(self, kind: str, record: Record) -> Record:
        return self.repository(kind).append(record)

    def remove_where(self, kind: str, predicate: Predicate) -> List[Record]:
        return self.repository(kind).remove_where(predicate)

    def counts(self) -> Dict[str, int]:
        return {kind: repo.count() for kind, repo in self._repositories.items()}


def _load_seed_file(path: Path, required: Tuple[str, ...]) -> List[Record]:
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise SeedDataError(f"Seed file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Invalid JSON in seed file {path}: {e}") from e

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise SeedDataError(f"Seed file {path} must contain a JSON array of objects")

    for position, record in enumerate(data):
        missing = [field for field in required if field not in record]
        if missing:
            raise SeedDataError(
                f"Record {position} in seed file {path} is missing {', '.join(missing)}"
            )

    return data
