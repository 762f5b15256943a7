"""
Prometheus metrics for the record store and the GraphQL surface
"""

from prometheus_client import Counter

RECORD_MUTATIONS_TOTAL = Counter(
    'record_mutations_total',
    'Records created or deleted in the in-memory store',
    labelnames=('kind', 'action'),  # action=create|delete
)

GRAPHQL_ROOT_FIELDS_TOTAL = Counter(
    'graphql_root_fields_total',
    'Root query and mutation fields dispatched',
    labelnames=('operation_type', 'field'),  # operation_type=query|mutation
)
