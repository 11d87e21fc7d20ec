"""Book catalog REST service.

Exposes CRUD endpoints for the library's book collection on top of FastAPI,
with persistence handled by SQLModel.
"""

__version__ = "0.1.0"
