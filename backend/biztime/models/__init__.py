"""ORM Models: table definitions for companies and invoices.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models describe the schema only; handlers query with raw SQL

Design Decisions:
    - One file per entity for locality
    - All models imported here so relationship() string references resolve
      and Base.metadata is complete before create_all runs
"""

from biztime.models.company import Company  # noqa: F401
from biztime.models.invoice import Invoice  # noqa: F401
