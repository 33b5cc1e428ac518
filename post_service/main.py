"""
Post Service - GraphQL API over an in-memory Post store
Main entry point for Flask application
"""

import os

from flask import Flask, jsonify
from flask_cors import CORS
from prometheus_client import make_wsgi_app
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from .config.settings import config
from .config.logger import setup_logger, get_logger
from .repositories import PostRepository
from .api import create_graphql_view

# Get configuration
ENV = os.getenv('FLASK_ENV', 'production')
app_config = config.get(ENV, config['default'])


def create_app(config_class=None, post_repo: PostRepository = None):
    """
    Application factory

    Args:
        config_class: Configuration class to use
        post_repo: Repository to serve; a new one is created when omitted

    Returns:
        Flask application instance
    """

    if config_class is None:
        config_class = app_config

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging
    logger = setup_logger(config_class)
    environment = config_class.FLASK_ENV
    logger.info(f"Creating Flask app in {environment} mode")

    # Setup CORS
    CORS(app, origins=config_class.CORS_ORIGINS)

    # Add Prometheus metrics endpoint
    if config_class.PROMETHEUS_ENABLED:
        app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
            '/metrics': make_wsgi_app()
        })

    # Record store
    if post_repo is None:
        post_repo = PostRepository()
        if config_class.PRELOAD_FIXTURES:
            post_repo.load_fixtures()
    app.extensions['post_repo'] = post_repo

    # Register routes
    register_routes(app, post_repo)

    # Error handlers
    register_error_handlers(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'service': 'post-service',
            'version': '1.0.0',
            'environment': environment,
            'posts': post_repo.count()
        }), 200

    return app


def register_routes(app: Flask, post_repo: PostRepository):
    """
    Register all routes

    Args:
        app: Flask application instance
        post_repo: Repository backing the GraphQL resolvers
    """

    logger = get_logger()

    app.add_url_rule("/graphql", view_func=create_graphql_view(post_repo))
    logger.info("✓ GraphQL registered successfully at /graphql")

    for rule in app.url_map.iter_rules():
        methods = ','.join(sorted(rule.methods - {'OPTIONS', 'HEAD'}))
        logger.debug(f"  {rule.rule:30s} [{methods}]")


def register_error_handlers(app: Flask):
    """
    Register error handlers

    Args:
        app: Flask application instance
    """

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


def main():
    app = create_app()

    # Get server config
    host = app.config['SERVER_HOST']
    port = app.config['SERVER_PORT']
    debug = app.config['DEBUG']

    logger = get_logger()
    logger.info(f"Now server is running on http://localhost:{port}/graphql")

    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
