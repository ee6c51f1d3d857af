"""Credit card models."""

from .base import ApiModel, ApiPayload


class Card(ApiModel):
    brand: str | None = None
    card_id: str | None = None
    country: str | None = None
    country_code: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    last4: str | None = None
    name: str | None = None
    user_email: str | None = None


class CardResponse(ApiModel):
    card: Card | None = None


class CardList(ApiModel):
    cards: list[Card] = []


class CreateCardPayload(ApiPayload):
    """Body for adding a card; ``stripe_token`` comes from the Stripe SDK."""

    stripe_token: str | None = None


class UpdateCardPayload(ApiPayload):
    exp_month: int | None = None
    exp_year: int | None = None
    name: str | None = None


class StripeKey(ApiModel):
    stripe_key: str | None = None
