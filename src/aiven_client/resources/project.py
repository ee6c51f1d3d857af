"""Projects, project members, VPCs, billing and key management."""

from typing import Any

from ..types.billing import CreditList, CreditResponse, InvoiceList
from ..types.key_management import Certificate
from ..types.project import (
    AlertList,
    EventList,
    MemberType,
    PeeringConnection,
    ProjectInviteResponse,
    ProjectList,
    ProjectResponse,
    ProjectUserList,
    ProjectVpc,
    ProjectVpcList,
)
from .base import (
    CreateMixin,
    DeleteMixin,
    GetMixin,
    ListMixin,
    ResourceClient,
    UpdateMixin,
)


class ProjectApi(
    ListMixin[ProjectList],
    GetMixin[ProjectResponse],
    CreateMixin[ProjectResponse],
    UpdateMixin[ProjectResponse],
    DeleteMixin,
):
    """Project CRUD and project membership.

    Deleting a project fails while it still has running services.
    """

    collection_path = "project"
    item_path = "project/{project}"
    list_model = ProjectList
    item_model = ProjectResponse
    create_model = ProjectResponse
    update_model = ProjectResponse

    async def list_events(self, project: str) -> EventList:
        """Get the event log of a project, newest first."""
        return await self._get(
            self.path("project/{project}/events", project=project), EventList
        )

    async def list_alerts(self, project: str) -> AlertList:
        """List the active alerts of a project."""
        return await self._get(
            self.path("project/{project}/alerts", project=project), AlertList
        )

    async def list_users(self, project: str) -> ProjectUserList:
        """List members and pending invitations of a project."""
        return await self._get(
            self.path("project/{project}/users", project=project), ProjectUserList
        )

    async def invite_user(
        self,
        project: str,
        user_email: str,
        member_type: MemberType = MemberType.DEVELOPER,
    ) -> None:
        """Send a membership invitation to an email address.

        Args:
            project: Project name.
            user_email: Address that receives the invitation.
            member_type: Role granted once the invite is accepted.
        """
        await self._post(
            self.path("project/{project}/invite", project=project),
            {"user_email": user_email, "member_type": MemberType(member_type).value},
        )

    async def confirm_invite(
        self, project: str, verification_code: str
    ) -> ProjectInviteResponse:
        """Accept a project invitation with its verification code."""
        return await self._get(
            self.path(
                "project/{project}/invite/{verification_code}",
                project=project,
                verification_code=verification_code,
            ),
            ProjectInviteResponse,
        )

    async def delete_invitation(self, project: str, invited_email: str) -> None:
        """Withdraw a pending project invitation."""
        await self._delete(
            self.path(
                "project/{project}/invite/{invited_email}",
                project=project,
                invited_email=invited_email,
            )
        )

    async def update_user(
        self, project: str, user_email: str, member_type: MemberType
    ) -> None:
        """Change the role of an existing project member."""
        await self._put(
            self.path(
                "project/{project}/user/{user_email}",
                project=project,
                user_email=user_email,
            ),
            {"member_type": MemberType(member_type).value},
        )

    async def remove_user(self, project: str, user_email: str) -> None:
        """Remove a member from the project."""
        await self._delete(
            self.path(
                "project/{project}/user/{user_email}",
                project=project,
                user_email=user_email,
            )
        )


class ProjectVpcApi(ListMixin[ProjectVpcList], GetMixin[ProjectVpc]):
    """Project VPCs and their peering connections."""

    collection_path = "project/{project}/vpcs"
    item_path = "project/{project}/vpcs/{project_vpc_id}"
    list_model = ProjectVpcList
    item_model = ProjectVpc

    async def create(self, payload: Any, project: str) -> ProjectVpc:
        """Request a new VPC; it is built asynchronously by the platform."""
        return await self._post(
            self.path(self.collection_path, project=project), payload, ProjectVpc
        )

    async def delete(self, project: str, project_vpc_id: str) -> ProjectVpc:
        """Delete a VPC and return its final state."""
        return await self._delete(
            self.path(self.item_path, project=project, project_vpc_id=project_vpc_id),
            ProjectVpc,
        )

    async def create_peering_connection(
        self, payload: Any, project: str, project_vpc_id: str
    ) -> PeeringConnection:
        """Request a peering connection from a project VPC."""
        return await self._post(
            self.path(
                "project/{project}/vpcs/{project_vpc_id}/peering-connections",
                project=project,
                project_vpc_id=project_vpc_id,
            ),
            payload,
            PeeringConnection,
        )

    async def delete_peering_connection(
        self,
        project: str,
        project_vpc_id: str,
        peer_cloud_account: str,
        peer_vpc: str,
        peer_region: str | None = None,
    ) -> PeeringConnection:
        """Delete a peering connection.

        Args:
            project: Project name.
            project_vpc_id: VPC identifier.
            peer_cloud_account: Cloud account of the peer.
            peer_vpc: VPC identifier on the peer side.
            peer_region: Peer region, required when the same peer VPC is
                peered in more than one region.

        Returns:
            The peering connection in its deleting state.
        """
        template = (
            "project/{project}/vpcs/{project_vpc_id}/peering-connections"
            "/peer-accounts/{peer_cloud_account}/peer-vpcs/{peer_vpc}"
        )
        scope = {
            "project": project,
            "project_vpc_id": project_vpc_id,
            "peer_cloud_account": peer_cloud_account,
            "peer_vpc": peer_vpc,
        }
        if peer_region is not None:
            template += "/peer-regions/{peer_region}"
            scope["peer_region"] = peer_region
        return await self._delete(self.path(template, **scope), PeeringConnection)

    async def update_user_peer_network_cidrs(
        self, payload: Any, project: str, project_vpc_id: str
    ) -> ProjectVpc:
        """Add or remove user defined peer network CIDRs."""
        return await self._put(
            self.path(
                "project/{project}/vpcs/{project_vpc_id}/user-peer-network-cidrs",
                project=project,
                project_vpc_id=project_vpc_id,
            ),
            payload,
            ProjectVpc,
        )


class ProjectBillingApi(ResourceClient):
    """Credits and invoices of a single project."""

    async def list_credits(self, project: str) -> CreditList:
        """List the credits available to a project."""
        return await self._get(
            self.path("project/{project}/credits", project=project), CreditList
        )

    async def claim_credit_code(self, project: str, code: str) -> CreditResponse:
        """Redeem a credit code for the project."""
        return await self._post(
            self.path("project/{project}/credits", project=project),
            {"code": code},
            CreditResponse,
        )

    async def list_invoices(self, project: str) -> InvoiceList:
        """List the invoices of a project."""
        return await self._get(
            self.path("project/{project}/invoice", project=project), InvoiceList
        )

    async def download_invoice(
        self, project: str, invoice_number: str, download_cookie: str
    ) -> bytes:
        """Download an invoice as PDF.

        Args:
            project: Project name.
            invoice_number: Invoice number from list_invoices.
            download_cookie: Download cookie from the same invoice entry.

        Returns:
            The raw PDF document.
        """
        return await self._transport.send_bytes(
            "GET",
            self.path(
                "project/{project}/invoice/{invoice_number}/{download_cookie}",
                project=project,
                invoice_number=invoice_number,
                download_cookie=download_cookie,
            ),
        )


class ProjectKeyManagementApi(ResourceClient):
    async def get_ca_certificate(self, project: str) -> Certificate:
        """Retrieve the CA certificate used by the project's services."""
        return await self._get(
            self.path("project/{project}/kms/ca", project=project), Certificate
        )
