"""
Todo backend package.

A FastAPI service exposing CRUD operations over todo items stored in SQLite,
with the built front-end served for every non-API path. The ASGI app lives at
``todo_api.main:app``.
"""

__version__ = "0.1.0"
