"""Billing group models."""

from .base import ApiModel, ApiPayload
from .billing import Credit, Invoice
from .project import CardInfo, Email


class BillingGroup(ApiModel):
    account_id: str | None = None
    account_name: str | None = None
    address_lines: list[str] | None = None
    billing_address: str | None = None
    billing_currency: str | None = None
    billing_emails: list[Email] | None = None
    billing_extra_text: str | None = None
    billing_group_id: str | None = None
    billing_group_name: str | None = None
    card_info: CardInfo | None = None
    city: str | None = None
    company: str | None = None
    country: str | None = None
    country_code: str | None = None
    estimated_balance_local: str | None = None
    estimated_balance_usd: str | None = None
    payment_method: str | None = None
    state: str | None = None
    vat_id: str | None = None
    zip_code: str | None = None


class BillingGroupResponse(ApiModel):
    billing_group: BillingGroup | None = None


class BillingGroupList(ApiModel):
    billing_groups: list[BillingGroup] = []


class BillingGroupPayload(ApiPayload):
    billing_group_name: str | None = None
    account_id: str | None = None
    address_lines: list[str] | None = None
    billing_currency: str | None = None
    billing_emails: list[Email] | None = None
    billing_extra_text: str | None = None
    card_id: str | None = None
    city: str | None = None
    company: str | None = None
    copy_from_billing_group: str | None = None
    country_code: str | None = None
    state: str | None = None
    vat_id: str | None = None
    zip_code: str | None = None


class BillingGroupCreditList(ApiModel):
    credits: list[Credit] = []


class BillingGroupEvent(ApiModel):
    actor: str | None = None
    billing_group_id: str | None = None
    create_time: str | None = None
    event_desc: str | None = None
    event_type: str | None = None
    log_entry_id: int | None = None
    project_id: str | None = None
    project_name: str | None = None


class BillingGroupEventList(ApiModel):
    events: list[BillingGroupEvent] = []


class BillingGroupInvoiceList(ApiModel):
    invoices: list[Invoice] = []


class InvoiceLine(ApiModel):
    cloud_name: str | None = None
    commitment_name: str | None = None
    description: str | None = None
    line_pre_discount_local: str | None = None
    line_total_local: str | None = None
    line_total_usd: str | None = None
    line_type: str | None = None
    local_currency: str | None = None
    project_name: str | None = None
    service_name: str | None = None
    service_plan: str | None = None
    service_type: str | None = None
    timestamp_begin: str | None = None
    timestamp_end: str | None = None


class InvoiceLineList(ApiModel):
    lines: list[InvoiceLine] = []


class AssociatedProject(ApiModel):
    available_credits: str | None = None
    estimated_balance: str | None = None
    project_name: str | None = None


class AssociatedProjectList(ApiModel):
    projects: list[AssociatedProject] = []
