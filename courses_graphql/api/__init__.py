"""
API Package
HTTP views and blueprints
"""

from .graphql_view import CoursesGraphQLView, STORE_EXTENSION
from .health_routes import create_health_routes

__all__ = [
    'CoursesGraphQLView',
    'STORE_EXTENSION',
    'create_health_routes'
]
