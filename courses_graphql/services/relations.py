"""
Relational Resolver
Maps a record to the first related record of another kind by foreign-key equality
"""

from typing import Dict, NamedTuple, Optional, Tuple

from ..config.logger import get_logger
from ..repositories import RecordStore
from ..repositories.base_repository import Record

logger = get_logger(__name__)


class Relation(NamedTuple):
    """A foreign-key link from one record kind to another"""
    target_kind: str
    source_field: str  # field read from the source record
    target_field: str  # field compared on each target record


RELATIONS: Dict[Tuple[str, str], Relation] = {
    ('courses', 'student'): Relation('students', 'id', 'courseId'),
    ('courses', 'grade'): Relation('grades', 'id', 'courseId'),
    ('students', 'course'): Relation('courses', 'courseId', 'id'),
    ('students', 'grade'): Relation('grades', 'id', 'studentId'),
}


def resolve_relation(store: RecordStore, from_kind: str, record: Record, relation: str) -> Optional[Record]:
    """
    Resolve a relation of a record by linear scan

    Args:
        store: Record store to scan
        from_kind: Kind of the source record
        record: Source record
        relation: Relation name, e.g. 'student' for a course

    Returns:
        First matching record in the target collection's current order, or None

    Raises:
        KeyError: if the relation is not defined for from_kind
    """
    try:
        rel = RELATIONS[(from_kind, relation)]
    except KeyError:
        raise KeyError(f"Unknown relation {relation!r} on {from_kind!r}") from None

    key = record[rel.source_field]
    match = store.repository(rel.target_kind).find_first(lambda r: r[rel.target_field] == key)
    logger.debug(f"Resolved {from_kind}.{relation} for id={record['id']}: {match['id'] if match else None}")
    return match


def student_for_course(store: RecordStore, course: Record) -> Optional[Record]:
    return resolve_relation(store, 'courses', course, 'student')


def grade_for_course(store: RecordStore, course: Record) -> Optional[Record]:
    return resolve_relation(store, 'courses', course, 'grade')


def course_for_student(store: RecordStore, student: Record) -> Optional[Record]:
    return resolve_relation(store, 'students', student, 'course')


def grade_for_student(store: RecordStore, student: Record) -> Optional[Record]:
    return resolve_relation(store, 'students', student, 'grade')
