import logging
import os
from flask import Flask, jsonify, render_template, request
from flask_cors import CORS
from flask_mail import Mail

# Initialize extensions
cors = CORS()
mail = Mail()


def create_app(config_name=None, config_overrides=None):
    flask_app = Flask(__name__)

    # Load configuration from Config class
    from config import config as app_configs
    config_name = config_name or os.environ.get('FLASK_CONFIG', 'default')
    flask_app.config.from_object(app_configs.get(config_name, app_configs['default']))
    if config_overrides:
        flask_app.config.update(config_overrides)

    # Fail fast instead of issuing unauthenticated calls later
    missing = [key for key in ('SUPABASE_URL', 'SUPABASE_KEY') if not flask_app.config.get(key)]
    if missing and not flask_app.config.get('TESTING'):
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")

    flask_app.logger.setLevel(getattr(logging, str(flask_app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    # Initialize extensions with flask_app
    cors.init_app(flask_app, resources={r"/api/*": {"origins": "*"}})
    mail.init_app(flask_app)

    # Register Blueprints
    from drishti.routes.page_routes import page_bp
    from drishti.routes.api_routes import api_bp
    from drishti.routes.admin_routes import admin_api_bp

    flask_app.register_blueprint(page_bp)
    flask_app.register_blueprint(api_bp)
    flask_app.register_blueprint(admin_api_bp)

    from drishti.commands import register_commands
    register_commands(flask_app)

    @flask_app.context_processor
    def inject_site():
        return {
            'site': {
                'name': flask_app.config['SITE_NAME'],
                'phone': flask_app.config['SITE_PHONE'],
                'address': flask_app.config['SITE_ADDRESS'],
            }
        }

    # Error handlers: JSON under /api, pages elsewhere
    @flask_app.errorhandler(404)
    def not_found_error(error):
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Not found'}), 404
        return render_template('errors/404.html'), 404

    @flask_app.errorhandler(413)
    def too_large_error(error):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'File too large'}), 413
        return error

    @flask_app.errorhandler(500)
    def internal_error(error):
        flask_app.logger.error(f"Unhandled error on {request.method} {request.path}: {error}")
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('errors/500.html'), 500

    return flask_app
