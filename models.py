# models.py
# Role: SQLAlchemy ORM models for the bakery ledger.
#       Defines the Transaction model, the only persisted entity.

from sqlalchemy import CheckConstraint, Column, Date, Float, Integer, String
from db import Base

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)


class Transaction(Base):
    """
    ORM model representing a single bakery transaction.

    The amount is always a positive magnitude; whether it adds to or
    subtracts from profit is decided by `type`.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_transactions_type"),
        # AUTOINCREMENT keeps ids from being reused after deletes
        {"sqlite_autoincrement": True},
    )

    # Primary key, assigned by the store
    id = Column(Integer, primary_key=True, index=True)

    # Calendar date of the transaction (no time component)
    date = Column(Date, nullable=False)

    description = Column(String, nullable=False)

    # Positive magnitude
    amount = Column(Float, nullable=False)

    # "income" or "expense"
    type = Column(String(7), nullable=False)

    # Free text; conventionally one of SUGGESTED_CATEGORIES[type]
    category = Column(String, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Transaction id={self.id} {self.date} {self.type} "
            f"{self.amount} {self.category!r}>"
        )


# Category suggestions per type, shown by the entry form. Not enforced.
SUGGESTED_CATEGORIES = {
    EXPENSE: [
        "Ingredients", "Packaging", "Utilities", "Logistics",
        "Equipment", "Labor", "Inventory", "Other",
    ],
    INCOME: ["Counter Sales", "Wholesale", "Special Orders", "Catering", "Other"],
}
