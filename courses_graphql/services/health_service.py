"""
Health Service
Store status reporting for the health endpoints
"""

from typing import Any, Dict
from datetime import datetime, timezone

from ..config.logger import LoggerMixin
from ..repositories import RecordStore


class HealthService(LoggerMixin):
    """Service for service health reporting"""

    def __init__(self, store: RecordStore, service_name: str, version: str, environment: str):
        """
        Initialize Health Service

        Args:
            store: RecordStore instance
            service_name: Name reported by the health endpoints
            version: Service version
            environment: Deployment environment name
        """
        self.store = store
        self.service_name = service_name
        self.version = version
        self.environment = environment

    def check_health(self) -> Dict[str, Any]:
        """
        Basic health status

        Returns:
            Service identification and status
        """
        return {
            'status': 'healthy',
            'service': self.service_name,
            'version': self.version,
            'environment': self.environment
        }

    def check_health_detailed(self) -> Dict[str, Any]:
        """
        Health status including record counts per kind

        Returns:
            Basic health plus timestamp and store counts
        """
        health = self.check_health()
        health['timestamp'] = datetime.now(timezone.utc).isoformat()
        health['records'] = self.store.counts()
        self.log_debug(f"Detailed health check: {health['records']}")
        return health
