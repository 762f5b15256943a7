"""
GraphQL Resolvers
Handlers behind the root query and mutation fields
"""

from typing import Callable, Dict, List, Optional

from ..repositories import RecordStore
from ..repositories.base_repository import Record


class ResolversContext:
    """Per-request context carrying the record store"""

    def __init__(self, store: RecordStore):
        self.store = store


# ============================================
# QUERY RESOLVERS
# ============================================

def list_courses_resolver(ctx: ResolversContext) -> List[Record]:
    """Resolver for courses query"""
    return ctx.store.list_all('courses')


def list_students_resolver(ctx: ResolversContext) -> List[Record]:
    """Resolver for students query"""
    return ctx.store.list_all('students')


def list_grades_resolver(ctx: ResolversContext) -> List[Record]:
    """Resolver for grades query"""
    return ctx.store.list_all('grades')


def get_course_resolver(ctx: ResolversContext, id: Optional[int] = None) -> Optional[Record]:
    """Resolver for course query, a missing id matches nothing"""
    return ctx.store.find_by_id('courses', id)


def get_student_resolver(ctx: ResolversContext, id: Optional[int] = None) -> Optional[Record]:
    """Resolver for student query"""
    return ctx.store.find_by_id('students', id)


def get_grade_resolver(ctx: ResolversContext, id: Optional[int] = None) -> Optional[Record]:
    """Resolver for grade query"""
    return ctx.store.find_by_id('grades', id)


# ============================================
# MUTATION RESOLVERS
# ============================================

def add_course_resolver(ctx: ResolversContext, name: str, description: str) -> Record:
    """Resolver for addCourse mutation"""
    return ctx.store.courses.create_course(name, description)


def add_student_resolver(ctx: ResolversContext, name: str, lastname: str, course_id: int) -> Record:
    """Resolver for addStudent mutation"""
    return ctx.store.students.create_student(name, lastname, course_id)


def add_grade_resolver(ctx: ResolversContext, course_id: int, student_id: int, grade: int) -> Record:
    """Resolver for addGrade mutation"""
    return ctx.store.grades.create_grade(course_id, student_id, grade)


def delete_course_resolver(ctx: ResolversContext, id: int) -> List[Record]:
    """Resolver for deleteCourse mutation; students and grades are left untouched"""
    return ctx.store.courses.delete(id)


def delete_student_resolver(ctx: ResolversContext, id: int) -> List[Record]:
    """Resolver for deleteStudent mutation"""
    return ctx.store.students.delete(id)


def delete_grade_resolver(ctx: ResolversContext, id: int) -> List[Record]:
    """Resolver for deleteGrade mutation"""
    return ctx.store.grades.delete(id)


QUERY_RESOLVERS: Dict[str, Callable] = {
    'courses': list_courses_resolver,
    'students': list_students_resolver,
    'grades': list_grades_resolver,
    'course': get_course_resolver,
    'student': get_student_resolver,
    'grade': get_grade_resolver,
}

MUTATION_RESOLVERS: Dict[str, Callable] = {
    'addCourse': add_course_resolver,
    'addStudent': add_student_resolver,
    'addGrade': add_grade_resolver,
    'deleteCourse': delete_course_resolver,
    'deleteStudent': delete_student_resolver,
    'deleteGrade': delete_grade_resolver,
}
