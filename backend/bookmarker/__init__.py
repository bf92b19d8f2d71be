"""
Bookmarker — Application Package Initializer
============================================

What: Marks the `bookmarker` directory as a Python package.
Why:  Enables module imports like `from bookmarker.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The package holds two independent ASGI applications:

    ┌─────────────────────────────────────┐
    │  bookmarker.main:app  (User API)    │  ← GET/POST /user, GET /health
    ├─────────────────────────────────────┤
    │  bookmarker.ui.shell:app (UI shell) │  ← route table → rendered component
    └─────────────────────────────────────┘

    The User API follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Data Access)      │  ← Query building, error wrapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The two applications share configuration, logging, middleware and the
    error-response format, but no data.
"""

__version__ = "1.0.0"
