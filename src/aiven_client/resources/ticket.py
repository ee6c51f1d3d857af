"""Support tickets."""

from ..types.ticket import TicketList, TicketResponse
from .base import CreateMixin, ListMixin


class TicketApi(ListMixin[TicketList], CreateMixin[TicketResponse]):
    collection_path = "project/{project}/tickets"
    list_model = TicketList
    create_model = TicketResponse

    async def invite_user(self, project: str, ticket_id: str, user_email: str) -> None:
        """Add a user as a follower of a support ticket."""
        await self._post(
            self.path(
                "project/{project}/tickets/{ticket_id}/invite",
                project=project,
                ticket_id=ticket_id,
            ),
            {"user_email": user_email},
        )
