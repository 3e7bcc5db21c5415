"""Invoice ORM: a billing record owned by exactly one company.

Invariants:
    - id is an auto-increment integer primary key
    - comp_code references companies.code and is removed with its company
    - amt is strictly positive
    - paid defaults to false, add_date to the current date, paid_date to NULL
"""

from datetime import date

from sqlalchemy import (
    Boolean, CheckConstraint, Date, Float, ForeignKey, Integer, Text, false, func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from biztime.db.base import Base


class Invoice(Base):
    """Invoice: amount and payment status for one company."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amt > 0", name="invoices_amt_check"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    comp_code: Mapped[str] = mapped_column(
        Text, ForeignKey("companies.code", ondelete="CASCADE"), nullable=False,
    )
    amt: Mapped[float] = mapped_column(Float, nullable=False)
    paid: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=false(),
    )
    add_date: Mapped[date] = mapped_column(
        Date, nullable=False, server_default=func.current_date(),
    )
    paid_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    company: Mapped["Company"] = relationship(
        "Company", back_populates="invoices",
    )
