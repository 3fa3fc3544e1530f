# backend/services/errors.py
"""
Error taxonomy for the auth flow.

AuthError subclasses are user-facing and rendered by the auth blueprint.
MisconfigurationError is raised at startup and is never turned into a response.
"""


class AuthError(Exception):
    status_code = 400
    message = "authentication failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class UserNotFound(AuthError):
    message = "User not found"


class InvalidCredentials(AuthError):
    message = "Wrong Password"


class MisconfigurationError(RuntimeError):
    pass
