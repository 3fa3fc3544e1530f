# config.py - jwtauth configuration & constants
import json
import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent


def load_appsettings(path) -> dict:
    """Read the JSON settings file; a missing file yields an empty dict."""
    p = Path(path)
    if not p.exists():
        return {}
    with open(p, "r", encoding="utf-8") as fh:
        return json.load(fh)


def get_section(settings: dict, key_path: str, default=None):
    """Resolve a colon separated path such as 'AppSettings:Token'."""
    node = settings
    for part in key_path.split(":"):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


APPSETTINGS_FILE = os.environ.get("APPSETTINGS_FILE", str(BASE_DIR / "appsettings.json"))
_SETTINGS = load_appsettings(APPSETTINGS_FILE)


# JWT / secrets
TOKEN_SECRET = os.environ.get("APPSETTINGS__TOKEN") or get_section(_SETTINGS, "AppSettings:Token", "") or ""
JWT_ALGO = os.environ.get("JWTAUTH_JWT_ALGO", "HS512")
TOKEN_LIFETIME_SECONDS = int(os.environ.get("JWTAUTH_TOKEN_LIFETIME", "86400"))
# HS512 keys below 512 bits are refused at startup
MIN_SECRET_BYTES = 64


# Registration responses carry the base64 hash/salt only when enabled
EXPOSE_PASSWORD_HASH = os.environ.get("JWTAUTH_EXPOSE_PASSWORD_HASH", "0") == "1"


# Other runtime settings
HOST = os.environ.get("JWTAUTH_HOST", "127.0.0.1")
PORT = int(os.environ.get("JWTAUTH_PORT", "5000"))
DEBUG = os.environ.get("JWTAUTH_DEBUG", "1") == "1"
CORS_ORIGINS = os.environ.get("JWTAUTH_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")


# Logging
LOGGER_NAME = "jwtauth"
LOG_LEVEL = os.environ.get("JWTAUTH_LOG_LEVEL", "INFO")
