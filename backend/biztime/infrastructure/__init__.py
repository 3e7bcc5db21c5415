"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store failures mapped to core/errors.py types
"""
