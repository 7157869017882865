import logging
import os

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .errors import EvaluationError
from .extensions import db, login_manager, migrate


def create_app(config_object='config.Config'):
    """App factory.

    ``config_object`` is an import path or class; tests pass ``config.TestConfig``.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # the gateway has already verified the caller; we only read who it is
    @login_manager.request_loader
    def load_caller(req):
        from .identity import caller_from_headers
        cfg = current_app.config
        return caller_from_headers(req.headers, cfg['IDENTITY_USER_HEADER'], cfg['IDENTITY_ROLE_HEADER'])

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "unauthorized", "message": "caller identity missing"}), 401

    from .blueprints.evaluation import bp as evaluation_bp
    app.register_blueprint(evaluation_bp, url_prefix="/evaluation")

    @app.errorhandler(EvaluationError)
    def handle_evaluation_error(err):
        if err.status_code >= 500:
            app.logger.error('%s %s failed: %s', request.method, request.path, err.message)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        if err.code is None or err.code < 400:
            return err
        return jsonify({"error": err.name.lower().replace(" ", "_"), "message": err.description}), err.code

    @app.get('/health')
    def health():
        return jsonify({"status": "ok"})

    # alembic/env.py sets SKIP_CREATE_ALL so migrations own the schema
    if app.config.get('AUTO_CREATE_TABLES') and not os.getenv('SKIP_CREATE_ALL'):
        with app.app_context():
            from . import models  # noqa: F401
            db.create_all()

    return app
