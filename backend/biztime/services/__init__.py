"""Handlers: one module per resource; each operation is one SQL statement.

Invariants:
    - Handlers receive the QueryExecutor explicitly (no global lookup)
    - Failures raised as core/errors.py types; status mapping happens in api/
"""
