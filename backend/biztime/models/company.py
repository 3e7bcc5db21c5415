"""Company ORM: a business identified by a short client-supplied code.

Invariants:
    - code is the primary key and never changes after insert
    - name and description are non-nullable

Design Decisions:
    - Invoices cascade at the database level (ON DELETE CASCADE on invoices.comp_code)
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db.base import Base


class Company(Base):
    """Company: owns zero or more invoices."""
    __tablename__ = "companies"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="company", passive_deletes=True,
    )
