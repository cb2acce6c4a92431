"""Customer Domain Entity

Read-only input to invoicing.
"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, String
from src.domain.base import BaseModel


class Customer(BaseModel, table=True):
    """
    Customer - Owner of invoices

    Domain Rules:
    - Never created or modified by the invoicing workflow
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_city', 'city'),
    )

    id: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Unique customer identifier"
    )

    first_name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Customer first name"
    )

    last_name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Customer last name"
    )

    street: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Street address"
    )

    city: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="City"
    )
