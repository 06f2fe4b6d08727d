"""
Flask application entry point for the tournament signup app.
"""
import os
from flask import Flask
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect
import config
import strings as text
from models.user import AdminUser
from services.logging_setup import configure_error_monitoring, configure_logging
from services.registry_client import init_registry

csrf = CSRFProtect()
login_manager = LoginManager()
login_manager.login_view = 'admin.login'
login_manager.login_message = 'Please log in to continue.'
login_manager.login_message_category = 'warning'


def create_app(config_object=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object or config.get_config())
    config.validate_runtime(app.config)
    configure_logging(bool(app.config.get('STRUCTURED_LOGGING', True)))
    configure_error_monitoring(app.config.get('SENTRY_DSN', ''))

    init_registry(app)
    csrf.init_app(app)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id: str):
        admin = AdminUser.from_config(app.config)
        if not user_id or user_id != admin.id:
            return None
        return admin

    # Inject text constants into all templates
    @app.context_processor
    def inject_strings():
        return {
            'NAV': text.section('NAV'),
            'COMPETITION': text.section('COMPETITION'),
            'ui': text.ui,
        }

    # Register blueprints
    from routes.form import form_bp
    from routes.admin import admin_bp

    app.register_blueprint(form_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    return app


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app = create_app()
    app.run(host='0.0.0.0', port=port, debug=False)
