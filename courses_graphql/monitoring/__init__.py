"""
Monitoring Module
Prometheus counters for store mutations and GraphQL dispatch
"""

from .metrics import RECORD_MUTATIONS_TOTAL, GRAPHQL_ROOT_FIELDS_TOTAL

__all__ = [
    'RECORD_MUTATIONS_TOTAL',
    'GRAPHQL_ROOT_FIELDS_TOTAL'
]
