"""Route Modules: one file per resource.

Invariants:
    - Each module exposes a router factory taking its service explicitly
    - Routes never contain SQL (delegate to the service)
"""
