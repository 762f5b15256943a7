"""
Pytest Configuration and Fixtures
Shared fixtures and configuration for all tests
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from courses_graphql.config.settings import TestingConfig
from courses_graphql.main import create_app
from courses_graphql.repositories import RecordStore


# ============================================
# APP & CONFIG FIXTURES
# ============================================

@pytest.fixture(scope='session')
def app_config():
    """Get testing configuration"""
    return TestingConfig()


@pytest.fixture
def app(app_config, store):
    """Create Flask app for testing, backed by a fresh store"""
    return create_app(app_config, store=store)


@pytest.fixture
def client(app):
    """Get Flask test client"""
    return app.test_client()


# ============================================
# STORE & REPOSITORY FIXTURES
# ============================================

@pytest.fixture
def store(app_config):
    """Fresh RecordStore loaded from the packaged seed data"""
    return RecordStore.from_seed_dir(app_config.SEED_DATA_DIR)


@pytest.fixture
def course_repo(store):
    return store.courses


@pytest.fixture
def student_repo(store):
    return store.students


@pytest.fixture
def grade_repo(store):
    return store.grades


@pytest.fixture
def resolvers_context(store):
    """Get ResolversContext over the fresh store"""
    from courses_graphql.graphql import ResolversContext
    return ResolversContext(store)


@pytest.fixture
def execute(resolvers_context):
    """Execute a GraphQL document against the schema with the fresh store"""
    from courses_graphql.graphql import schema

    def _execute(query, variables=None):
        return schema.execute_sync(query, variable_values=variables, context_value=resolvers_context)

    return _execute


# ============================================
# TEST DATA FIXTURES
# ============================================

@pytest.fixture
def sample_courses():
    return [
        {'id': 1, 'name': 'Chemistry', 'description': 'Organic chemistry'},
        {'id': 2, 'name': 'Biology', 'description': 'Cell biology'},
    ]


@pytest.fixture
def sample_students():
    return [
        {'id': 1, 'name': 'Ana', 'lastname': 'Lee', 'courseId': 2},
        {'id': 2, 'name': 'Bruno', 'lastname': 'Diaz', 'courseId': 2},
        {'id': 3, 'name': 'Carla', 'lastname': 'Ruiz', 'courseId': 9},
    ]


@pytest.fixture
def sample_grades():
    return [
        {'id': 1, 'courseId': 2, 'studentId': 2, 'grade': 5},
        {'id': 2, 'courseId': 2, 'studentId': 1, 'grade': 10},
    ]


@pytest.fixture
def sample_store(sample_courses, sample_students, sample_grades):
    """Small hand-built store with duplicate and dangling foreign keys"""
    return RecordStore.from_records(sample_courses, sample_students, sample_grades)


# ============================================
# MARKERS
# ============================================

def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "api: mark test as API test")
    config.addinivalue_line("markers", "repo: mark test as repository test")
    config.addinivalue_line("markers", "service: mark test as service test")
    config.addinivalue_line("markers", "graphql: mark test as GraphQL schema test")
