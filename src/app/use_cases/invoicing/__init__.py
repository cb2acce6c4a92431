"""Invoicing domain use cases"""
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .find_customer import FindCustomer
from .list_customers_in_city import ListCustomersInCity
from .get_customer_summary import GetCustomerSummary
from .count_customers import CountCustomers
from .dtos import (
    CreateInvoiceCommandDTO,
    InvoiceLineDTO,
    InvoiceResponseDTO,
    CustomerDTO,
    CustomerListResponseDTO,
    CustomerSummaryResponseDTO,
    CustomerCountResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "GetInvoice",
    "FindCustomer",
    "ListCustomersInCity",
    "GetCustomerSummary",
    "CountCustomers",
    "CreateInvoiceCommandDTO",
    "InvoiceLineDTO",
    "InvoiceResponseDTO",
    "CustomerDTO",
    "CustomerListResponseDTO",
    "CustomerSummaryResponseDTO",
    "CustomerCountResponseDTO",
]
