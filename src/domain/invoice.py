"""Invoice Domain Entity

Invoice header row and the state of one invoice creation.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, func
from src.domain.base import BaseModel


class InvoiceCreationState(str, Enum):
    """Progress of a single create-invoice call"""
    NOT_STARTED = "not_started"
    TRANSACTION_OPEN = "transaction_open"
    HEADER_INSERTED = "header_inserted"
    ITEM_INSERTED = "item_inserted"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class Invoice(BaseModel, table=True):
    """
    Invoice - Header of a customer invoice

    Domain Rules:
    - id is generated by the database at insert time
    - Created together with all of its items in one transaction
    - Never updated once committed
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_customer_id', 'customer_id'),
    )

    id: int = Field(
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        description="Unique invoice identifier (auto-increment)"
    )

    customer_id: int = Field(
        sa_column=Column(Integer, ForeignKey("customers.id"), nullable=False),
        description="Foreign key to Customer"
    )

    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=False, server_default=func.now()),
        description="Invoice creation timestamp (set by the database)"
    )
