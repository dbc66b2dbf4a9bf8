"""Core: domain types, errors, pure helpers and boundary protocols.

Invariants:
    - Core NEVER imports from api/, infrastructure/ or services/
    - Everything here is pure: no IO, no framework objects
"""
