"""Product Domain Entity

Source of the unit price copied into invoice line items.
"""

from decimal import Decimal
from sqlmodel import Field, Column
from sqlalchemy import Integer, Numeric
from src.domain.base import BaseModel


class Product(BaseModel, table=True):
    """
    Product - Priced catalog entry

    Domain Rules:
    - price is read once per line item at invoice time
    - Later price changes never touch existing line items
    """

    __tablename__ = "products"

    id: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique product identifier"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Current unit price (precision: 12,2)"
    )
