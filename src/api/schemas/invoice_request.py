"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from typing import List
from pydantic import BaseModel, Field


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint. Sequence lengths and quantity signs
    are checked by the use case so they come back as VALIDATION_ERROR.
    """

    customer_id: int = Field(
        ...,
        gt=0,
        description="ID of an existing customer"
    )

    product_ids: List[int] = Field(
        default_factory=list,
        description="Products to bill, in line order"
    )

    quantities: List[int] = Field(
        default_factory=list,
        description="Quantity for each product"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 5,
                "product_ids": [10, 20],
                "quantities": [2, 1],
            }
        }
