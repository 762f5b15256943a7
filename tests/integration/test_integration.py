"""
Integration Tests for the Courses GraphQL Service
HTTP-level tests through the Flask application
"""

import pytest

from courses_graphql.config.settings import TestingConfig
from courses_graphql.main import create_app
from courses_graphql.repositories import RecordStore


def graphql(client, query, variables=None):
    """POST a GraphQL document and return the decoded body"""
    payload = {'query': query}
    if variables is not None:
        payload['variables'] = variables
    response = client.post('/graphql', json=payload)
    return response.status_code, response.get_json()


# ============================================
# GRAPHQL ENDPOINT TESTS
# ============================================

@pytest.mark.integration
@pytest.mark.api
class TestGraphQLEndpoint:
    """Test the /graphql endpoint"""

    def test_query_courses(self, client):
        """Test listing courses over HTTP"""
        status, body = graphql(client, '{ courses { id name } }')

        assert status == 200
        assert len(body['data']['courses']) == 4
        assert 'errors' not in body

    def test_query_via_get(self, client):
        """Test queries are accepted via GET"""
        response = client.get('/graphql', query_string={'query': '{ course(id: 2) { name } }'})

        assert response.status_code == 200
        assert response.get_json()['data'] == {'course': {'name': 'Physics'}}

    def test_add_then_resolve_workflow(self, client):
        """Test creating a student and resolving its course in a later request"""
        status, body = graphql(
            client,
            'mutation { addStudent(name: "Ana", lastname: "Lee", courseId: 1) { id } }'
        )
        assert status == 200
        student_id = body['data']['addStudent']['id']
        assert student_id == 6

        _, body = graphql(
            client,
            'query ($id: Int) { student(id: $id) { name course { id name } } }',
            {'id': student_id}
        )

        assert body['data']['student'] == {
            'name': 'Ana',
            'course': {'id': 1, 'name': 'Mathematics'}
        }

    def test_mutations_persist_across_requests(self, client, store):
        """Test every request sees the same application store"""
        graphql(client, 'mutation { deleteCourse(id: 2) { id } }')
        graphql(client, 'mutation { addCourse(name: "Art", description: "Drawing") { id } }')

        _, body = graphql(client, '{ courses { id } }')

        assert [c['id'] for c in body['data']['courses']] == [1, 3, 4, 5]
        assert [c['id'] for c in store.list_all('courses')] == [1, 3, 4, 5]

    def test_delete_returns_full_list(self, client):
        """Test delete mutations answer with the remaining collection"""
        _, body = graphql(client, 'mutation { deleteGrade(id: 2) { id grade } }')

        assert body['data']['deleteGrade'] == [
            {'id': 1, 'grade': 9},
            {'id': 3, 'grade': 8},
            {'id': 4, 'grade': 6}
        ]

    def test_missing_required_argument(self, client, store):
        """Test validation failures produce errors and never reach the store"""
        _, body = graphql(client, 'mutation { addGrade(courseId: 1, studentId: 1) { id } }')

        assert body['errors']
        assert store.grades.count() == 4

    def test_malformed_document(self, client):
        """Test syntax errors are reported in errors"""
        _, body = graphql(client, '{ courses { id ')

        assert body['errors']

    def test_unknown_field(self, client):
        """Test unknown fields are rejected"""
        _, body = graphql(client, '{ teachers { id } }')

        assert body['errors']

    def test_graphiql_served_to_browsers(self, client):
        """Test the interactive IDE is served on the same path"""
        response = client.get('/graphql', headers={'Accept': 'text/html'})

        assert response.status_code == 200
        assert b'graphiql' in response.data.lower()


# ============================================
# HEALTH & ERROR HANDLER TESTS
# ============================================

@pytest.mark.integration
@pytest.mark.api
class TestServiceEndpoints:
    """Test health, metrics and error handlers"""

    def test_health(self, client):
        """Test the basic health check"""
        response = client.get('/health')

        assert response.status_code == 200
        assert response.get_json() == {
            'status': 'healthy',
            'service': 'courses-graphql',
            'version': '1.0.0',
            'environment': 'testing'
        }

    def test_health_detailed(self, client):
        """Test detailed health reflects mutations"""
        graphql(client, 'mutation { addCourse(name: "Art", description: "Drawing") { id } }')

        response = client.get('/health/detailed')

        assert response.status_code == 200
        assert response.get_json()['records'] == {'courses': 5, 'students': 5, 'grades': 4}

    def test_not_found_handler(self, client):
        """Test unknown routes return JSON errors"""
        response = client.get('/nope')

        assert response.status_code == 404
        assert response.get_json()['error'] == 'Not Found'

    def test_metrics_disabled_in_testing(self, client):
        """Test the metrics endpoint is off in the testing config"""
        assert client.get('/metrics').status_code == 404

    def test_metrics_enabled(self, store):
        """Test the Prometheus endpoint exposes the store counters"""

        class MetricsConfig(TestingConfig):
            PROMETHEUS_ENABLED = True

        client = create_app(MetricsConfig, store=store).test_client()
        client.post('/graphql', json={
            'query': 'mutation { addCourse(name: "Art", description: "Drawing") { id } }'
        })

        response = client.get('/metrics')

        assert response.status_code == 200
        assert b'record_mutations_total' in response.data
        assert b'graphql_root_fields_total' in response.data


# ============================================
# APP FACTORY TESTS
# ============================================

@pytest.mark.integration
class TestAppFactory:
    """Test create_app configuration handling"""

    def test_loads_seed_dir_from_config(self):
        """Test the store is loaded from SEED_DATA_DIR when not given"""
        app = create_app(TestingConfig)

        store = app.extensions['record_store']
        assert isinstance(store, RecordStore)
        assert store.counts() == {'courses': 4, 'students': 5, 'grades': 4}

    def test_length_id_strategy(self):
        """Test the legacy count + 1 strategy can be selected"""

        class LegacyIdsConfig(TestingConfig):
            ID_STRATEGY = 'length'

        client = create_app(LegacyIdsConfig).test_client()
        graphql(client, 'mutation { deleteCourse(id: 1) { id } }')

        _, body = graphql(client, 'mutation { addCourse(name: "Art", description: "Drawing") { id } }')

        assert body['data']['addCourse'] == {'id': 4}

    def test_graphiql_disabled(self):
        """Test the IDE can be turned off"""

        class NoIdeConfig(TestingConfig):
            GRAPHIQL_ENABLED = False

        client = create_app(NoIdeConfig).test_client()
        response = client.get('/graphql', headers={'Accept': 'text/html'})

        assert b'graphiql' not in response.data.lower()

    def test_graphql_context_holds_app_store(self, app, store):
        """Test each GraphQL request context is built from the application store"""
        from flask import request
        from courses_graphql.api import CoursesGraphQLView
        from courses_graphql.graphql import ResolversContext, schema

        view = CoursesGraphQLView(schema=schema)
        with app.test_request_context('/graphql'):
            context = view.get_context(request, None)

        assert isinstance(context, ResolversContext)
        assert context.store is store
        assert vars(context) == {'store': store}
