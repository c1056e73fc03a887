# Creates the Flask app (App Factory)
from datetime import timedelta
from flask import Flask, request, session
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
import os
import logging
from .config import Config

# Initialize the database handle shared by models and store
db = SQLAlchemy()


# Application Factory Function
def create_app(config=None):
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    app.permanent_session_lifetime = timedelta(seconds=app.config['SESSION_LIFETIME_SECONDS'])

    # Logging configuration (DEBUG level by default)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=app.config['LOG_LEVEL'],
                            format='%(asctime)s %(levelname)s %(name)s - %(message)s')
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Ensure media folders exist
    for kind in ('avatars', 'images'):
        os.makedirs(os.path.join(app.config['ASSETS_FOLDER'], kind), exist_ok=True)

    # Extensions
    db.init_app(app)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # Import and register the blueprints from routes.py
    from .routes import web as web_blueprint, api as api_blueprint
    app.register_blueprint(web_blueprint)
    app.register_blueprint(api_blueprint, url_prefix='/api')

    with app.app_context():
        from . import models  # noqa: F401
        db.create_all()
    app.logger.debug(f"Posts table ready at {app.config['SQLALCHEMY_DATABASE_URI']}")

    # Status messages expire after a short period of inactivity
    @app.before_request
    def make_session_permanent():
        session.permanent = True

    @app.after_request
    def trace_request(response):
        app.logger.debug(f'{request.method} {request.path} -> {response.status_code}')
        return response

    app.logger.debug('Application created and configured')
    return app
