"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case. product_ids and quantities are
    parallel sequences: line N bills quantities[N-1] of product_ids[N-1].
    Consistency of the two sequences is checked by the use case.
    """

    customer_id: int = Field(
        ...,
        description="ID of an existing customer"
    )

    product_ids: List[int] = Field(
        default_factory=list,
        description="Products to bill, in line order"
    )

    quantities: List[int] = Field(
        default_factory=list,
        description="Quantity for each product (same length as product_ids, each > 0)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 5,
                "product_ids": [10, 20],
                "quantities": [2, 1],
            }
        }


class InvoiceLineDTO(BaseModel):
    """One invoice line with its price snapshot"""

    line_number: int = Field(
        ...,
        description="1-based line number"
    )

    product_id: int = Field(
        ...,
        description="Product billed on this line"
    )

    quantity: int = Field(
        ...,
        description="Quantity billed"
    )

    unit_price: Decimal = Field(
        ...,
        description="Unit price at invoice time"
    )

    total_price: Decimal = Field(
        ...,
        description="quantity * unit_price"
    )


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Returned by CreateInvoice and GetInvoice.
    """

    invoice_id: int = Field(
        ...,
        description="Invoice ID generated by the database"
    )

    customer_id: int = Field(
        ...,
        description="Owning customer ID"
    )

    total_amount: Decimal = Field(
        ...,
        description="Sum of all line totals"
    )

    line_items: List[InvoiceLineDTO] = Field(
        default_factory=list,
        description="Invoice lines ordered by line number"
    )

    created_at: Optional[datetime] = Field(
        default=None,
        description="Invoice creation timestamp"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 42,
                "customer_id": 5,
                "total_amount": "250.00",
                "line_items": [
                    {
                        "line_number": 1,
                        "product_id": 10,
                        "quantity": 2,
                        "unit_price": "100.00",
                        "total_price": "200.00",
                    },
                    {
                        "line_number": 2,
                        "product_id": 20,
                        "quantity": 1,
                        "unit_price": "50.00",
                        "total_price": "50.00",
                    },
                ],
                "created_at": "2024-01-31T00:00:00Z",
            }
        }


class CustomerDTO(BaseModel):
    """Customer as returned by the query use cases"""

    customer_id: int = Field(..., description="Customer ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    street: Optional[str] = Field(default=None, description="Street address")
    city: Optional[str] = Field(default=None, description="City")


class CustomerListResponseDTO(BaseModel):
    """
    Response DTO for customers living in a city

    Returned by ListCustomersInCity use case.
    """

    city: str = Field(..., description="City searched")
    customers: List[CustomerDTO] = Field(
        default_factory=list,
        description="Customers ordered by ID"
    )
    count: int = Field(..., description="Number of customers returned")


class CustomerSummaryResponseDTO(BaseModel):
    """
    Response DTO for a customer's invoicing summary

    Returned by GetCustomerSummary use case.
    """

    customer_id: int = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer last name")
    invoice_count: int = Field(..., description="Number of invoices")
    total_amount: Decimal = Field(..., description="Revenue over all invoices")

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 5,
                "name": "Smith",
                "invoice_count": 3,
                "total_amount": "750.00",
            }
        }


class CustomerCountResponseDTO(BaseModel):
    """Response DTO for CountCustomers use case"""

    total_customers: int = Field(..., description="Number of customers")
