"""Infrastructure: database sessions, repositories and logging setup.

Invariants:
    - All IO lives here; core/ never imports from this package
"""
