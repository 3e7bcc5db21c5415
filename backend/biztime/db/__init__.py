"""Database Schema: SQLAlchemy Base shared by all table definitions.

Invariants:
    - Single metadata object for companies and invoices
"""
