# backend/routes/auth_routes.py
# Bodies are bare JSON values: the user record, the token string, or the error message.
from flask import Blueprint, current_app, jsonify, request
from services.errors import AuthError
from utils.helper import read_credentials


bp = Blueprint("auth", __name__, url_prefix="/api/auth")

MALFORMED_BODY = "username and password required"


def _manager():
    return current_app.extensions["credentials"]


@bp.errorhandler(AuthError)
def handle_auth_error(err: AuthError):
    return jsonify(err.message), err.status_code


@bp.route("/register", methods=["POST"])
def register():
    creds = read_credentials(request.get_json(silent=True))
    if creds is None:
        return jsonify(MALFORMED_BODY), 400
    user = _manager().register(*creds)
    expose = bool(current_app.config.get("EXPOSE_PASSWORD_HASH", False))
    return jsonify(user.to_dict(include_secrets=expose))


@bp.route("/login", methods=["POST"])
def login():
    creds = read_credentials(request.get_json(silent=True))
    if creds is None:
        return jsonify(MALFORMED_BODY), 400
    token = _manager().login(*creds)
    return jsonify(token)
