"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from infsite.api import app

    uvicorn infsite.api:app --reload
"""

from infsite.api.app import app, create_app

__all__ = ["app", "create_app"]
