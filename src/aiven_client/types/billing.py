"""Project billing models: credits and invoices."""

from pydantic import Field

from .base import ApiModel


class Credit(ApiModel):
    code: str | None = None
    remaining_value: str | None = None
    credit_type: str | None = Field(None, alias="type")
    value: str | None = None


class CreditResponse(ApiModel):
    credit: Credit | None = None


class CreditList(ApiModel):
    credits: list[Credit] = []


class Invoice(ApiModel):
    billing_group_id: str | None = None
    billing_group_name: str | None = None
    currency: str | None = None
    download_cookie: str | None = None
    invoice_number: str | None = None
    period_begin: str | None = None
    period_end: str | None = None
    state: str | None = None
    total_inc_vat: str | None = None
    total_vat_zero: str | None = None


class InvoiceResponse(ApiModel):
    invoice: Invoice | None = None


class InvoiceList(ApiModel):
    invoices: list[Invoice] = []
