"""
GraphQL Package
GraphQL API implementation with schema and resolvers
"""

from .schema import schema
from .resolvers import (
    ResolversContext,
    QUERY_RESOLVERS,
    MUTATION_RESOLVERS
)

__all__ = [
    'schema',
    'ResolversContext',
    'QUERY_RESOLVERS',
    'MUTATION_RESOLVERS'
]
