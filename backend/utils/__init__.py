# backend/utils/__init__.py
# Re-export helpers for simple 'from utils import ...' usage.

from .helper import (
    b64,
    json_ok,
    read_credentials,
)
from .logger import logger, setup_logger

__all__ = [
    "b64",
    "json_ok",
    "read_credentials",
    "logger",
    "setup_logger",
]
