"""Infrastructure Layer: store sessions, token verification, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver errors mapped to core/errors.py types
"""
