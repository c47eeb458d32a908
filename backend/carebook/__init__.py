"""
CareBook Backend — Application Package Initializer
===================================================

What: Marks the `carebook` directory as a Python package.
Why:  Enables module imports like `from carebook.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend follows the same layered shape as any FastAPI service,
    with the persistence layer replaced by in-memory stores:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Required fields, references
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic records and payloads
    ├─────────────────────────────────────┤
    │         Stores (In-Memory)          │  ← Ordered, lock-guarded lists
    └─────────────────────────────────────┘

    Routes never touch a store directly; they call a service, and services
    raise CareBookError subclasses that the global handlers in main.py turn
    into `{"message", "code"}` responses.
"""

__version__ = "1.0.0"
