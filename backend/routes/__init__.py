# backend/routes/__init__.py
"""Flask blueprints."""
