"""
Courses GraphQL Service
Main entry point for Flask application
"""

import os

from flask import Flask, jsonify
from flask_cors import CORS
from prometheus_client import make_wsgi_app
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from .config.settings import config
from .config.logger import setup_logger, get_logger
from .repositories import RecordStore

# Get configuration
ENV = os.getenv('FLASK_ENV', 'production')
app_config = config.get(ENV, config['default'])


def create_app(config_class=None, store: RecordStore = None):
    """
    Application factory

    Args:
        config_class: Configuration class to use
        store: Pre-built record store, loaded from SEED_DATA_DIR when omitted

    Returns:
        Flask application instance
    """

    if config_class is None:
        config_class = app_config

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging
    logger = setup_logger(config_class)
    logger.info(f"Creating Flask app in {config_class.FLASK_ENV} mode")

    # Setup CORS
    CORS(app, origins=config_class.CORS_ORIGINS)

    # Add Prometheus metrics endpoint
    if config_class.PROMETHEUS_ENABLED:
        app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
            '/metrics': make_wsgi_app()
        })

    # Seed data is loaded once and lives for the process lifetime
    if store is None:
        store = RecordStore.from_seed_dir(config_class.SEED_DATA_DIR, config_class.ID_STRATEGY)

    register_routes(app, store)

    # Error handlers
    register_error_handlers(app)

    return app


def register_routes(app: Flask, store: RecordStore):
    """
    Register all routes/blueprints

    Args:
        app: Flask application instance
        store: Record store served by the GraphQL endpoint
    """

    from .api import CoursesGraphQLView, STORE_EXTENSION, create_health_routes
    from .graphql import schema as graphql_schema
    from .services import HealthService

    logger = get_logger()

    app.extensions[STORE_EXTENSION] = store

    health_service = HealthService(
        store,
        service_name=app.config['SERVICE_NAME'],
        version=app.config['SERVICE_VERSION'],
        environment=app.config['FLASK_ENV']
    )
    app.register_blueprint(create_health_routes(health_service))

    graphql_path = app.config['GRAPHQL_PATH']
    app.add_url_rule(
        graphql_path,
        view_func=CoursesGraphQLView.as_view(
            'graphql_view',
            schema=graphql_schema,
            graphql_ide='graphiql' if app.config['GRAPHIQL_ENABLED'] else None
        )
    )
    logger.info(f"GraphQL registered at {graphql_path}")

    for rule in app.url_map.iter_rules():
        methods = ','.join(sorted(rule.methods - {'OPTIONS', 'HEAD'}))
        logger.debug(f"  {rule.rule:30s} [{methods}]")


def register_error_handlers(app: Flask):
    """
    Register error handlers

    Args:
        app: Flask application instance
    """

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({
            'error': 'Bad Request',
            'message': str(error)
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Not Found',
            'message': 'Resource not found'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'error': 'Method Not Allowed',
            'message': str(error)
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger = get_logger()
        logger.error(f"Internal server error: {str(error)}")
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred'
        }), 500


if __name__ == '__main__':
    app = create_app()

    # Get server config
    host = app.config['SERVER_HOST']
    port = app.config['SERVER_PORT']
    debug = app.config['DEBUG']

    logger = get_logger()
    logger.info(f"Starting Flask server on {host}:{port}")

    app.run(host=host, port=port, debug=debug)
