"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from wikisearch.api import app

    uvicorn wikisearch.api:app --reload
"""

from wikisearch.api.app import app

__all__ = ["app"]
