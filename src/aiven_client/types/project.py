"""Project, membership, event and VPC models."""

from enum import Enum
from typing import Any

from .base import ApiModel, ApiPayload


class MemberType(str, Enum):
    """Role of a user inside a project."""

    ADMIN = "admin"
    DEVELOPER = "developer"
    OPERATOR = "operator"
    READ_ONLY = "read_only"


class Email(ApiModel):
    email: str | None = None


class CardInfo(ApiModel):
    brand: str | None = None
    card_id: str | None = None
    country: str | None = None
    country_code: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    last4: str | None = None
    name: str | None = None
    user_email: str | None = None


class Project(ApiModel):
    """A project: the unit of billing and access control for services."""

    account_id: str | None = None
    available_credits: str | None = None
    billing_address: str | None = None
    billing_currency: str | None = None
    billing_emails: list[Email] | None = None
    billing_extra_text: str | None = None
    billing_group_id: str | None = None
    billing_group_name: str | None = None
    card_info: CardInfo | None = None
    country: str | None = None
    country_code: str | None = None
    default_cloud: str | None = None
    estimated_balance: str | None = None
    features: dict[str, Any] | None = None
    payment_method: str | None = None
    project_name: str | None = None
    tech_emails: list[Email] | None = None
    tenant_id: str | None = None
    trial_expiration_time: str | None = None
    vat_id: str | None = None


class ProjectResponse(ApiModel):
    project: Project | None = None


class ProjectList(ApiModel):
    # Maps project name to the member type of the current user.
    project_membership: dict[str, str] | None = None
    projects: list[Project] = []


class CreateProjectPayload(ApiPayload):
    project: str | None = None
    account_id: str | None = None
    billing_address: str | None = None
    billing_currency: str | None = None
    billing_emails: list[Email] | None = None
    billing_extra_text: str | None = None
    billing_group_id: str | None = None
    card_id: str | None = None
    cloud: str | None = None
    copy_from_project: str | None = None
    country_code: str | None = None
    tech_emails: list[Email] | None = None
    vat_id: str | None = None


class UpdateProjectPayload(ApiPayload):
    project_name: str | None = None
    account_id: str | None = None
    billing_address: str | None = None
    billing_currency: str | None = None
    billing_emails: list[Email] | None = None
    billing_extra_text: str | None = None
    card_id: str | None = None
    cloud: str | None = None
    country_code: str | None = None
    tech_emails: list[Email] | None = None
    vat_id: str | None = None


class InviteDetails(ApiModel):
    user_email: str | None = None


class ProjectInviteResponse(ApiModel):
    invite_details: InviteDetails | None = None


class Invitation(ApiModel):
    invite_time: str | None = None
    invited_user_email: str | None = None
    inviting_user_email: str | None = None
    member_type: str | None = None


class ProjectUser(ApiModel):
    auth: list[str] | None = None
    billing_contact: bool | None = None
    create_time: str | None = None
    member_type: str | None = None
    real_name: str | None = None
    team_id: str | None = None
    team_name: str | None = None
    user_email: str | None = None


class ProjectUserList(ApiModel):
    users: list[ProjectUser] = []
    invitations: list[Invitation] = []


class Event(ApiModel):
    actor: str | None = None
    event_desc: str | None = None
    event_type: str | None = None
    service_name: str | None = None
    time: str | None = None


class EventList(ApiModel):
    events: list[Event] = []


class Alert(ApiModel):
    create_time: str | None = None
    event: str | None = None
    project_name: str | None = None
    service_name: str | None = None
    service_type: str | None = None
    severity: str | None = None


class AlertList(ApiModel):
    alerts: list[Alert] = []


class StateInfo(ApiModel):
    message: str | None = None
    type: str | None = None


class PeeringConnection(ApiModel):
    create_time: str | None = None
    peer_azure_app_id: str | None = None
    peer_azure_tenant_id: str | None = None
    peer_cloud_account: str | None = None
    peer_region: str | None = None
    peer_resource_group: str | None = None
    peer_vpc: str | None = None
    state: str | None = None
    state_info: StateInfo | None = None
    update_time: str | None = None
    user_peer_network_cidrs: list[str] | None = None


class ProjectVpc(ApiModel):
    cloud_name: str | None = None
    create_time: str | None = None
    network_cidr: str | None = None
    peering_connections: list[PeeringConnection] | None = None
    project_vpc_id: str | None = None
    state: str | None = None
    update_time: str | None = None


class ProjectVpcList(ApiModel):
    vpcs: list[ProjectVpc] = []


class PeeringConnectionPayload(ApiPayload):
    peer_cloud_account: str | None = None
    peer_vpc: str | None = None
    peer_region: str | None = None
    peer_azure_app_id: str | None = None
    peer_azure_tenant_id: str | None = None
    peer_resource_group: str | None = None
    user_peer_network_cidrs: list[str] | None = None


class CreateVpcPayload(ApiPayload):
    cloud_name: str | None = None
    network_cidr: str | None = None
    peering_connections: list[PeeringConnectionPayload] | None = None


class UserPeerNetworkCidr(ApiPayload):
    cidr: str | None = None
    peer_cloud_account: str | None = None
    peer_resource_group: str | None = None
    peer_vpc: str | None = None


class UpdateUserPeerNetworkCidrsPayload(ApiPayload):
    add: list[UserPeerNetworkCidr] | None = None
    delete: list[str] | None = None
