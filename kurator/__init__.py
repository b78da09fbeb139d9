"""
Kurator Backend — Application Package Initializer
==================================================

What: Marks the `kurator` directory as a Python package.
Who:  Imported by uvicorn (`kurator.main:app`), by `python -m kurator`, and by pytest.

Architecture Note:
    The service is a thin layer over a single MongoDB collection:

    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Schemas (API contract)       │  ← Pydantic models
    ├─────────────────────────────────────┤
    │     WordStore (Persistence)         │  ← Async Motor client
    └─────────────────────────────────────┘

    Routes call the store directly; there is no service layer because
    every endpoint is exactly one database operation.
"""

__version__ = "0.1.0"
