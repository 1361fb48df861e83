"""
Portfolio CMS - Main Application Entry Point
Built on the Application Factory Pattern for modular architecture

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
import time
from datetime import datetime, timezone
from flask import Flask, jsonify, request, g
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from config import get_config
from extensions import db, cors, login_manager
from utils.errors import APIError
from utils.sessions import SessionManager
from utils.seed import seed_database

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.content import content_bp
from blueprints.profile import profile_bp
from blueprints.messages import messages_bp
from blueprints.uploads import uploads_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    register_commands(app)

    # Health check route
    @app.route('/api/health')
    def health_check():
        return jsonify({
            'status': 'ok',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'message': 'Server is running'
        }), 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)
    cors.init_app(
        app,
        resources={r'/api/*': {'origins': app.config.get('CORS_ORIGINS', '*')}},
        allow_headers=['Content-Type', 'Authorization']
    )

    # Admin sessions live in memory, one store per application
    app.extensions['session_manager'] = SessionManager(
        ttl_seconds=app.config.get('SESSION_TTL_SECONDS')
    )

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")
            return

        if app.config.get('SEED_DATABASE'):
            try:
                seed_database()
            except APIError as e:
                app.logger.error(f"✗ Database seeding failed: {e.message}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(content_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(messages_bp)
    app.register_blueprint(uploads_bp)


def register_error_handlers(app):
    """Render every error as a JSON ``{message, errors?}`` body"""

    @app.errorhandler(APIError)
    def api_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def file_too_large(e):
        limit_mb = (app.config.get('MAX_CONTENT_LENGTH') or 0) // (1024 * 1024)
        return jsonify({'message': f'File is too large. Maximum size is {limit_mb}MB.'}), 413

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'message': e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def internal_server_error(e):
        app.logger.exception(f"Server Error: {str(e)}")
        return jsonify({'message': 'Internal Server Error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_api_request(response):
        """Log API traffic as ``METHOD path status in Nms``"""
        if request.path.startswith('/api'):
            started = g.get('request_started', time.perf_counter())
            duration = int((time.perf_counter() - started) * 1000)
            log_line = f"{request.method} {request.path} {response.status_code} in {duration}ms"
            if len(log_line) > 80:
                log_line = log_line[:79] + "…"
            app.logger.info(log_line)
        return response

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


def register_commands(app):
    """Register ``flask`` CLI commands"""

    @app.cli.command('seed')
    def seed_command():
        """Fill an empty database with demo portfolio content."""
        if seed_database():
            print("Database seeded successfully!")
        else:
            print("Database already has data, skipping seed.")


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0' if env == 'production' else '127.0.0.1',
        port=int(os.environ.get('PORT', 8080)),
        debug=(env == 'development')
    )
