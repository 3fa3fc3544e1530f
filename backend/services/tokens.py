# backend/services/tokens.py
from datetime import timedelta

from flask_jwt_extended import create_access_token

ROLE = "Admin"


class TokenIssuer:
    """
    Builds compact JWTs for an authenticated user.
    Algorithm and secret come from the Flask app's JWT_ALGORITHM / JWT_SECRET_KEY,
    so create_token must run inside an application context.
    """

    def __init__(self, lifetime: timedelta = timedelta(days=1)):
        self.lifetime = lifetime

    def create_token(self, user) -> str:
        claims = {
            "name": user.username,
            "role": ROLE,
        }
        return create_access_token(
            identity=user.username,
            additional_claims=claims,
            expires_delta=self.lifetime,
        )
