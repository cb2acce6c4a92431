"""Invoice Item Domain Entity

One line of an invoice with its price snapshot.
"""

from decimal import Decimal
from sqlmodel import Field, Column
from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, Numeric
from src.domain.base import BaseModel


class Item(BaseModel, table=True):
    """
    Item - Line item within an invoice

    Domain Rules:
    - Identity is (invoice_id, line_number)
    - line_number runs 1..N in the order products were supplied
    - price is a copy of Product.price at creation time
    - line total = quantity * price
    """

    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_items_quantity_positive"),
    )

    invoice_id: int = Field(
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            ForeignKey("invoices.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        description="Foreign key to Invoice"
    )

    line_number: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False),
        description="1-based line number within the invoice"
    )

    product_id: int = Field(
        sa_column=Column(Integer, ForeignKey("products.id"), nullable=False),
        description="Foreign key to Product"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Quantity billed (must be > 0)"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Unit price snapshot copied from Product"
    )

    @property
    def total_price(self) -> Decimal:
        return self.quantity * self.price
