"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share one JSON envelope (see core/errors.py)
"""
