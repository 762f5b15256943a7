"""
Health Routes
Liveness and store status endpoints
"""

from flask import Blueprint, jsonify

from ..services import HealthService


def create_health_routes(health_service: HealthService) -> Blueprint:
    """
    Create health blueprint

    Args:
        health_service: HealthService instance

    Returns:
        Flask Blueprint with routes
    """

    api = Blueprint('health', __name__)

    @api.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify(health_service.check_health()), 200

    @api.route('/health/detailed', methods=['GET'])
    def health_check_detailed():
        """Detailed health check with record counts"""
        return jsonify(health_service.check_health_detailed()), 200

    return api
