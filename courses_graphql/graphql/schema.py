"""
GraphQL Schema Definition
Courses, students and grades with their relations, queries and mutations
"""

import strawberry
from strawberry.types import Info
from typing import Any, Dict, List, Optional

from ..monitoring.metrics import GRAPHQL_ROOT_FIELDS_TOTAL
from ..services.relations import (
    student_for_course, grade_for_course, course_for_student, grade_for_student
)
from .resolvers import QUERY_RESOLVERS, MUTATION_RESOLVERS


# ============================================
# RECORD TYPES
# ============================================

@strawberry.type(description='Course data')
class Course:
    id: int
    name: str
    description: str
    record: strawberry.Private[Dict[str, Any]]

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Course':
        return cls(
            id=record['id'],
            name=record['name'],
            description=record['description'],
            record=record
        )

    @strawberry.field(description='First student attending this course')
    def student(self, info: Info) -> Optional['Student']:
        related = student_for_course(info.context.store, self.record)
        return Student.from_record(related) if related else None

    @strawberry.field(description='First grade recorded for this course')
    def grade(self, info: Info) -> Optional['Grade']:
        related = grade_for_course(info.context.store, self.record)
        return Grade.from_record(related) if related else None


@strawberry.type(description='Student data')
class Student:
    id: int
    name: str
    lastname: str
    course_id: int
    record: strawberry.Private[Dict[str, Any]]

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Student':
        return cls(
            id=record['id'],
            name=record['name'],
            lastname=record['lastname'],
            course_id=record['courseId'],
            record=record
        )

    @strawberry.field(description='Course the student attends')
    def course(self, info: Info) -> Optional[Course]:
        related = course_for_student(info.context.store, self.record)
        return Course.from_record(related) if related else None

    @strawberry.field(description='First grade recorded for this student')
    def grade(self, info: Info) -> Optional['Grade']:
        related = grade_for_student(info.context.store, self.record)
        return Grade.from_record(related) if related else None


@strawberry.type(name='Grades', description='Student grades')
class Grade:
    id: int
    course_id: int
    student_id: int
    grade: int
    record: strawberry.Private[Dict[str, Any]]

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Grade':
        return cls(
            id=record['id'],
            course_id=record['courseId'],
            student_id=record['studentId'],
            grade=record['grade'],
            record=record
        )


def _dispatch(info: Info, operation_type: str, field: str, **kwargs):
    resolvers = QUERY_RESOLVERS if operation_type == 'query' else MUTATION_RESOLVERS
    GRAPHQL_ROOT_FIELDS_TOTAL.labels(operation_type=operation_type, field=field).inc()
    return resolvers[field](info.context, **kwargs)


# ============================================
# QUERIES
# ============================================

@strawberry.type(description='Root Query')
class Query:
    """GraphQL Queries"""

    @strawberry.field(description='List all courses')
    def courses(self, info: Info) -> List[Course]:
        return [Course.from_record(r) for r in _dispatch(info, 'query', 'courses')]

    @strawberry.field(description='List all students')
    def students(self, info: Info) -> List[Student]:
        return [Student.from_record(r) for r in _dispatch(info, 'query', 'students')]

    @strawberry.field(description='List all grades')
    def grades(self, info: Info) -> List[Grade]:
        return [Grade.from_record(r) for r in _dispatch(info, 'query', 'grades')]

    @strawberry.field(description='Course by id')
    def course(self, info: Info, id: Optional[int] = None) -> Optional[Course]:
        record = _dispatch(info, 'query', 'course', id=id)
        return Course.from_record(record) if record else None

    @strawberry.field(description='Student by id')
    def student(self, info: Info, id: Optional[int] = None) -> Optional[Student]:
        record = _dispatch(info, 'query', 'student', id=id)
        return Student.from_record(record) if record else None

    @strawberry.field(description='Grade by id')
    def grade(self, info: Info, id: Optional[int] = None) -> Optional[Grade]:
        record = _dispatch(info, 'query', 'grade', id=id)
        return Grade.from_record(record) if record else None


# ============================================
# MUTATIONS
# ============================================

@strawberry.type(description='Root Mutation')
class Mutation:
    """GraphQL Mutations"""

    @strawberry.mutation(description='Add a course')
    def add_course(self, info: Info, name: str, description: str) -> Course:
        record = _dispatch(info, 'mutation', 'addCourse', name=name, description=description)
        return Course.from_record(record)

    @strawberry.mutation(description='Add a student')
    def add_student(self, info: Info, name: str, lastname: str, course_id: int) -> Student:
        record = _dispatch(
            info, 'mutation', 'addStudent',
            name=name, lastname=lastname, course_id=course_id
        )
        return Student.from_record(record)

    @strawberry.mutation(description='Add a grade')
    def add_grade(self, info: Info, course_id: int, student_id: int, grade: int) -> Grade:
        record = _dispatch(
            info, 'mutation', 'addGrade',
            course_id=course_id, student_id=student_id, grade=grade
        )
        return Grade.from_record(record)

    @strawberry.mutation(description='Delete a course, returns the remaining courses')
    def delete_course(self, info: Info, id: int) -> List[Course]:
        return [Course.from_record(r) for r in _dispatch(info, 'mutation', 'deleteCourse', id=id)]

    @strawberry.mutation(description='Delete a student, returns the remaining students')
    def delete_student(self, info: Info, id: int) -> List[Student]:
        return [Student.from_record(r) for r in _dispatch(info, 'mutation', 'deleteStudent', id=id)]

    @strawberry.mutation(description='Delete a grade, returns the remaining grades')
    def delete_grade(self, info: Info, id: int) -> List[Grade]:
        return [Grade.from_record(r) for r in _dispatch(info, 'mutation', 'deleteGrade', id=id)]


# ============================================
# SCHEMA
# ============================================

schema = strawberry.Schema(query=Query, mutation=Mutation)
