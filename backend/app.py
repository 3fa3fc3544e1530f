# backend/app.py
from datetime import timedelta

from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager
import config
from services.credentials import CredentialManager
from services.errors import MisconfigurationError
from services.tokens import TokenIssuer
from utils.helper import json_ok
from utils.logger import logger


def _check_secret(secret, min_bytes: int):
    if not isinstance(secret, str) or not secret:
        logger.error("AppSettings:Token is not configured")
        raise MisconfigurationError("signing secret AppSettings:Token is missing or empty")
    if len(secret.encode("utf-8")) < min_bytes:
        logger.error("AppSettings:Token is shorter than %d bytes", min_bytes)
        raise MisconfigurationError(f"signing secret must be at least {min_bytes} bytes")


def create_app(overrides=None):
    """
    Flask application factory.
    `overrides` is an optional mapping applied on top of the values from config.
    """
    app = Flask(__name__, static_folder=None)

    # JWT config
    app.config["JWT_SECRET_KEY"] = getattr(config, "TOKEN_SECRET", "")
    app.config["JWT_ALGORITHM"] = getattr(config, "JWT_ALGO", "HS512")
    app.config["TOKEN_LIFETIME_SECONDS"] = getattr(config, "TOKEN_LIFETIME_SECONDS", 86400)
    app.config["MIN_SECRET_BYTES"] = getattr(config, "MIN_SECRET_BYTES", 64)
    app.config["EXPOSE_PASSWORD_HASH"] = getattr(config, "EXPOSE_PASSWORD_HASH", False)
    app.config["PROPAGATE_EXCEPTIONS"] = True
    if overrides:
        app.config.update(overrides)

    _check_secret(app.config["JWT_SECRET_KEY"], app.config["MIN_SECRET_BYTES"])

    # CORS - allow frontend localhost during dev
    CORS(app, resources={r"/api/*": {"origins": getattr(config, "CORS_ORIGINS", [])}}, supports_credentials=True)

    # JWT manager
    JWTManager(app)

    issuer = TokenIssuer(lifetime=timedelta(seconds=int(app.config["TOKEN_LIFETIME_SECONDS"])))
    app.extensions["credentials"] = CredentialManager(issuer)

    from routes.auth_routes import bp as auth_bp
    app.register_blueprint(auth_bp)

    # basic health check
    @app.route("/health")
    def health():
        return jsonify(json_ok({"status": "ok"}))

    return app


if __name__ == "__main__":
    app = create_app()
    host = getattr(config, "HOST", "127.0.0.1")
    port = int(getattr(config, "PORT", 5000))
    debug = bool(getattr(config, "DEBUG", True))
    logger.info("Starting jwtauth backend on %s:%s (debug=%s)", host, port, debug)
    app.run(host=host, port=port, debug=debug)
