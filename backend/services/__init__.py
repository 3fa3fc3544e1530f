# backend/services/__init__.py
"""
Services package initialization.
Provides easy imports for the credential, token and error modules.
"""

from . import credentials
from . import errors
from . import tokens

__all__ = [
    "credentials",
    "errors",
    "tokens",
]
