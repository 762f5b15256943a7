"""
GraphQL View
Strawberry Flask view that hands the application's record store to resolvers
"""

from flask import current_app
from strawberry.flask.views import GraphQLView

from ..graphql.resolvers import ResolversContext

STORE_EXTENSION = 'record_store'


class CoursesGraphQLView(GraphQLView):
    """GraphQL endpoint with a ResolversContext per request"""

    def get_context(self, request, response) -> ResolversContext:
        return ResolversContext(current_app.extensions[STORE_EXTENSION])
