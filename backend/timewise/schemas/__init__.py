"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire names are camelCase; Python attributes are snake_case
"""
