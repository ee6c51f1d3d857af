"""Billing groups: shared payment settings for a set of projects."""

from collections.abc import Iterable

from ..types.billing import CreditResponse, InvoiceResponse
from ..types.billing_group import (
    AssociatedProjectList,
    BillingGroupCreditList,
    BillingGroupEventList,
    BillingGroupInvoiceList,
    BillingGroupList,
    BillingGroupResponse,
    InvoiceLineList,
)
from .base import CreateMixin, DeleteMixin, GetMixin, ListMixin, UpdateMixin

BILLING_GROUP_PATH = "billing-group/{billing_group_id}"
INVOICE_PATH = BILLING_GROUP_PATH + "/invoice/{invoice_number}"


class BillingGroupApi(
    ListMixin[BillingGroupList],
    GetMixin[BillingGroupResponse],
    CreateMixin[BillingGroupResponse],
    UpdateMixin[BillingGroupResponse],
    DeleteMixin,
):
    collection_path = "billing-group"
    item_path = BILLING_GROUP_PATH
    list_model = BillingGroupList
    item_model = BillingGroupResponse
    create_model = BillingGroupResponse
    update_model = BillingGroupResponse

    async def list_credits(self, billing_group_id: str) -> BillingGroupCreditList:
        """List the credits available to a billing group."""
        return await self._get(
            self.path(
                BILLING_GROUP_PATH + "/credits", billing_group_id=billing_group_id
            ),
            BillingGroupCreditList,
        )

    async def claim_credit_code(
        self, billing_group_id: str, code: str
    ) -> CreditResponse:
        """Redeem a credit code for every project of the billing group."""
        return await self._post(
            self.path(
                BILLING_GROUP_PATH + "/credits", billing_group_id=billing_group_id
            ),
            {"code": code},
            CreditResponse,
        )

    async def list_events(self, billing_group_id: str) -> BillingGroupEventList:
        """Get the event log of a billing group."""
        return await self._get(
            self.path(
                BILLING_GROUP_PATH + "/events", billing_group_id=billing_group_id
            ),
            BillingGroupEventList,
        )

    async def list_invoices(self, billing_group_id: str) -> BillingGroupInvoiceList:
        """List the invoices of a billing group."""
        return await self._get(
            self.path(
                BILLING_GROUP_PATH + "/invoice", billing_group_id=billing_group_id
            ),
            BillingGroupInvoiceList,
        )

    async def get_invoice(
        self, billing_group_id: str, invoice_number: str
    ) -> InvoiceResponse:
        """Get a single invoice of a billing group."""
        return await self._get(
            self.path(
                INVOICE_PATH,
                billing_group_id=billing_group_id,
                invoice_number=invoice_number,
            ),
            InvoiceResponse,
        )

    async def get_invoice_lines(
        self, billing_group_id: str, invoice_number: str
    ) -> InvoiceLineList:
        """List the line items of an invoice."""
        return await self._get(
            self.path(
                INVOICE_PATH + "/lines",
                billing_group_id=billing_group_id,
                invoice_number=invoice_number,
            ),
            InvoiceLineList,
        )

    async def download_invoice(
        self, billing_group_id: str, invoice_number: str, download_cookie: str
    ) -> bytes:
        """Download an invoice of the billing group as PDF."""
        return await self._transport.send_bytes(
            "GET",
            self.path(
                INVOICE_PATH + "/{download_cookie}",
                billing_group_id=billing_group_id,
                invoice_number=invoice_number,
                download_cookie=download_cookie,
            ),
        )

    async def list_projects(self, billing_group_id: str) -> AssociatedProjectList:
        """List the projects billed through this billing group."""
        return await self._get(
            self.path(
                BILLING_GROUP_PATH + "/projects", billing_group_id=billing_group_id
            ),
            AssociatedProjectList,
        )

    async def assign_project(self, billing_group_id: str, project: str) -> None:
        """Move one project into the billing group."""
        await self._post(
            self.path(
                BILLING_GROUP_PATH + "/project-assign/{project}",
                billing_group_id=billing_group_id,
                project=project,
            )
        )

    async def assign_projects(
        self, billing_group_id: str, projects: Iterable[str]
    ) -> None:
        """Move several projects into the billing group at once.

        Args:
            billing_group_id: Target billing group.
            projects: Names of the projects to assign.
        """
        await self._post(
            self.path(
                BILLING_GROUP_PATH + "/projects-assign",
                billing_group_id=billing_group_id,
            ),
            {"projects_names": list(projects)},
        )
