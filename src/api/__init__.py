"""FastAPI host for the tutor.

Serves the NiceGUI chat page (mounted in ``src.main``) and operational routes.

Endpoints:
    - GET /health: Service health status
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
