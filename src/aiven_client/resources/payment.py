"""Credit cards of the current user."""

from ..types.payment import CardList, CardResponse, StripeKey
from .base import CreateMixin, DeleteMixin, ListMixin, UpdateMixin


class PaymentApi(
    ListMixin[CardList],
    CreateMixin[CardResponse],
    UpdateMixin[CardResponse],
    DeleteMixin,
):
    """Credit card management.

    Cards are tokenized with Stripe before they are sent to Aiven; use
    :meth:`get_stripe_key` to get the publishable key for that.
    """

    collection_path = "card"
    item_path = "card/{card_id}"
    list_model = CardList
    create_model = CardResponse
    update_model = CardResponse

    async def get_stripe_key(self) -> str | None:
        """Return the Stripe publishable key."""
        response = await self._get("config/stripe_key", StripeKey)
        return response.stripe_key
