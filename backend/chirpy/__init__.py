"""
Chirpy Backend — Application Package Initializer
=================================================

What: Marks the `chirpy` directory as a Python package.
Who:  Used by uvicorn (`uvicorn chirpy.main:app`) and by pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Routes + Middleware (HTTP)      │  ← status codes, content types
    ├─────────────────────────────────────┤
    │   Services (censor, validator,      │  ← pure logic, hit counter
    │   hit counter, user repository)     │
    ├─────────────────────────────────────┤
    │    Models & Schemas (Data)          │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │    Database (Persistence)           │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes stay thin and delegate to services; services raise exceptions
    from `chirpy.exceptions`, which the handlers in `chirpy.main` turn into
    `{"error": ...}` JSON bodies.
"""

__version__ = "1.0.0"
