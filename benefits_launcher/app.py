"""
Application factory
"""

# Python Packages
import logging
from datetime import timedelta

import click
from flask import Flask, request
from flask_cors import CORS
from flask_login import LoginManager
from flask_migrate import Migrate
from werkzeug.middleware.proxy_fix import ProxyFix

# Local Imports
from .base import constants
from .config.swagger import api
from .config.urls import URLs
from .config.database import init_db, db
from .config.logging import configure_logging
from .config.celery import init_celery

# Exceptions
from .util.exceptions import UnauthorizedException
from .util import messages

security_logger = logging.getLogger("benefits_launcher.security")

# Responses logged for the security trail
AUDITED_PATHS = ("/api/admin/", "/api/auth/user")
AUTH_ATTEMPT_PATHS = ("/api/auth/login", "/api/auth/register")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "1; mode=block"
}





def init_login(app):
    """
    Flask-Login session handling; unauthenticated access is a JSON 401
    """

    login_manager = LoginManager()
    login_manager.session_protection = "basic"
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import User

        if not str(user_id).isdigit():
            return None
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        error = UnauthorizedException(messages.ERROR["LOGIN_REQUIRED"])
        return error.to_dict(), error.status_code

    return login_manager


def init_security(app):
    @app.after_request
    def apply_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)

        if request.path.startswith("/api/"):
            response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
            response.headers.setdefault("Cache-Control", "no-store")

        if constants.APP_ENV == "production":
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")

        return response

    @app.after_request
    def log_security_events(response):
        ip_address = request.remote_addr or ""
        extra = {"component": "security", "ip_address": ip_address, "path": request.path}

        if request.path.startswith(AUDITED_PATHS):
            security_logger.info("%s %s -> %s", request.method, request.path, response.status_code, extra = extra)

        elif request.path in AUTH_ATTEMPT_PATHS and response.status_code in (401, 429):
            security_logger.warning("Failed auth attempt -> %s", response.status_code, extra = extra)

        return response


def register_commands(app):
    @app.cli.command("seed-plans")
    def seed_plans():
        """ Insert the sample carrier plans that are missing... """

        from .plans.services.plan_service import PlanService

        created = PlanService().seed_plans()
        click.echo(f"Seeded {created} plans")


def create_app(config_overrides = None):
    """
    Application Factory
    """

    configure_logging()

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV == "development"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY
    app.config["UPLOAD_DIR"] = constants.UPLOAD_DIR
    app.config["MAX_CONTENT_LENGTH"] = constants.MAX_UPLOAD_SIZE_MB * 1024 * 1024 * 2

    # Session cookie
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(minutes = constants.SESSION_LIFETIME_MINUTES)
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Strict"
    app.config["SESSION_COOKIE_SECURE"] = constants.APP_ENV == "production"
    app.config["REMEMBER_COOKIE_HTTPONLY"] = True

    if config_overrides:
        app.config.update(config_overrides)

    # Client address from the trusted proxy hop only
    if constants.TRUSTED_PROXY_COUNT > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for = constants.TRUSTED_PROXY_COUNT)

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Sessions
    init_login(app)

    # Enable CORS
    CORS(app, resources = {r"/api/*": {"origins": constants.CORS_ORIGINS}}, supports_credentials = True)

    # Register Namespaces, then bind Swagger to this app
    URLs.add_namespaces()
    api.init_app(app)

    # Background tasks
    init_celery(app)

    init_security(app)
    register_commands(app)

    return app



# Create app instance for Flask CLI
app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000)
