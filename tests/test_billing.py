"""Tests for billing groups and payment cards."""

import pytest

from aiven_client.errors import RemoteError
from aiven_client.types.billing_group import BillingGroupPayload
from aiven_client.types.payment import CreateCardPayload, UpdateCardPayload

BG_ID = "7d14419c-fc63-4b43-9ac8-7d8b7f2b3a11"
BG = f"/v1/billing-group/{BG_ID}"

# ---------------------------------------------------------------------------
# Billing group CRUD
# ---------------------------------------------------------------------------


async def test_get_billing_group(make_client, load_json):
    """A billing group document is parsed and round-trips."""
    data = load_json("billing_group/get.json")
    client, handler = make_client(json_body=data)

    result = await client.billing_group().get(billing_group_id=BG_ID)

    assert handler.last.method == "GET"
    assert handler.last.url.path == BG
    group = result.billing_group
    assert group.billing_emails[0].email == "billing@example.com"
    assert group.card_info.last4 == "4242"
    assert result.to_dict() == data


async def test_list_billing_groups(make_client, load_json):
    """Billing groups are listed at the collection root."""
    group = load_json("billing_group/get.json")["billing_group"]
    client, handler = make_client(json_body={"billing_groups": [group]})

    result = await client.billing_group().list_all()

    assert handler.last.url.path == "/v1/billing-group"
    assert result.billing_groups[0].billing_group_id == BG_ID


async def test_create_billing_group(make_client, load_json):
    """Creation posts only the given settings."""
    client, handler = make_client(json_body=load_json("billing_group/get.json"))
    payload = BillingGroupPayload(
        billing_group_name="Default billing group",
        billing_currency="EUR",
        billing_emails=[{"email": "billing@example.com"}],
    )

    result = await client.billing_group().create(payload)

    assert handler.last.method == "POST"
    assert handler.last_json() == {
        "billing_group_name": "Default billing group",
        "billing_currency": "EUR",
        "billing_emails": [{"email": "billing@example.com"}],
    }
    assert result.billing_group.billing_currency == "EUR"


async def test_update_and_delete_billing_group(make_client, load_json):
    """Updates are PUT and deletion is DELETE on the group path."""
    client, handler = make_client(json_body=load_json("billing_group/get.json"))
    api = client.billing_group()

    await api.update(BillingGroupPayload(vat_id=None), billing_group_id=BG_ID)
    assert handler.last.method == "PUT"
    assert handler.last_json() == {"vat_id": None}

    await api.delete(billing_group_id=BG_ID)
    assert handler.last.method == "DELETE"
    assert handler.last.url.path == BG


async def test_get_unknown_billing_group(make_client):
    """A 404 surfaces as a RemoteError with the API message."""
    client, _ = make_client(
        status_code=404,
        json_body={"errors": [{"message": "Billing group not found", "status": 404}]},
    )

    with pytest.raises(RemoteError) as exc_info:
        await client.billing_group().get(billing_group_id="missing")

    assert exc_info.value.status == 404
    assert exc_info.value.messages == ["Billing group not found"]


# ---------------------------------------------------------------------------
# Credits, events, invoices
# ---------------------------------------------------------------------------


async def test_credits(make_client):
    """Credits are listed and claimed on the same path."""
    credit = {"code": "FREE", "remaining_value": "10.00", "type": "discount"}
    client, handler = make_client(json_body={"credits": [credit], "credit": credit})
    api = client.billing_group()

    listed = await api.list_credits(BG_ID)
    assert handler.last.url.path == f"{BG}/credits"
    assert listed.credits[0].credit_type == "discount"

    claimed = await api.claim_credit_code(BG_ID, "FREE")
    assert handler.last.method == "POST"
    assert handler.last_json() == {"code": "FREE"}
    assert claimed.credit.remaining_value == "10.00"


async def test_list_events(make_client):
    """The event log is read from the events path."""
    client, handler = make_client(
        json_body={
            "events": [
                {
                    "actor": "admin@example.com",
                    "event_type": "billing_group_update",
                    "log_entry_id": 3,
                }
            ]
        }
    )

    result = await client.billing_group().list_events(BG_ID)

    assert handler.last.url.path == f"{BG}/events"
    assert result.events[0].log_entry_id == 3


async def test_invoices(make_client):
    """Invoices and their lines are addressed by invoice number."""
    client, handler = make_client(
        json_body={
            "invoices": [{"invoice_number": "inv-1", "state": "paid"}],
            "invoice": {"invoice_number": "inv-1", "download_cookie": "c00kie"},
            "lines": [{"line_total_usd": "5.00", "service_name": "pg"}],
        }
    )
    api = client.billing_group()

    invoices = await api.list_invoices(BG_ID)
    assert handler.last.url.path == f"{BG}/invoice"
    assert invoices.invoices[0].state == "paid"

    invoice = await api.get_invoice(BG_ID, "inv-1")
    assert handler.last.url.path == f"{BG}/invoice/inv-1"
    assert invoice.invoice.download_cookie == "c00kie"

    lines = await api.get_invoice_lines(BG_ID, "inv-1")
    assert handler.last.url.path == f"{BG}/invoice/inv-1/lines"
    assert lines.lines[0].line_total_usd == "5.00"


async def test_download_invoice(make_client):
    """The invoice PDF is returned as raw bytes."""
    client, handler = make_client(content=b"%PDF-1.4 billing")

    pdf = await client.billing_group().download_invoice(BG_ID, "inv-1", "c00kie")

    assert handler.last.url.path == f"{BG}/invoice/inv-1/c00kie"
    assert pdf == b"%PDF-1.4 billing"


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


async def test_list_projects(make_client):
    """Associated projects are listed with GET."""
    client, handler = make_client(
        json_body={"projects": [{"project_name": "p", "estimated_balance": "1.00"}]}
    )

    result = await client.billing_group().list_projects(BG_ID)

    assert handler.last.method == "GET"
    assert handler.last.url.path == f"{BG}/projects"
    assert result.projects[0].project_name == "p"


async def test_assign_project(make_client):
    """A single project is assigned through its own path segment."""
    client, handler = make_client(json_body={"message": "assigned"})

    assert await client.billing_group().assign_project(BG_ID, "my project") is None
    assert handler.last.method == "POST"
    assert handler.last.url.raw_path == f"{BG}/project-assign/my%20project".encode()


async def test_assign_projects(make_client):
    """Several projects are assigned with one call."""
    client, handler = make_client(json_body={"message": "assigned"})

    await client.billing_group().assign_projects(BG_ID, (p for p in ("a", "b")))

    assert handler.last.url.path == f"{BG}/projects-assign"
    assert handler.last_json() == {"projects_names": ["a", "b"]}


# ---------------------------------------------------------------------------
# Payment cards
# ---------------------------------------------------------------------------


CARD = {
    "brand": "Visa",
    "card_id": "card-1",
    "exp_month": 12,
    "exp_year": 2030,
    "last4": "4242",
    "name": "Jane Doe",
}


async def test_card_lifecycle(make_client):
    """Cards are listed, added, updated and removed."""
    client, handler = make_client(json_body={"cards": [CARD], "card": CARD})
    api = client.payment()

    cards = await api.list_all()
    assert handler.last.url.path == "/v1/card"
    assert cards.cards[0].last4 == "4242"

    added = await api.create(CreateCardPayload(stripe_token="tok_visa"))
    assert handler.last.method == "POST"
    assert handler.last_json() == {"stripe_token": "tok_visa"}
    assert added.card.card_id == "card-1"

    await api.update(UpdateCardPayload(exp_year=2031), card_id="card-1")
    assert handler.last.method == "PUT"
    assert handler.last.url.path == "/v1/card/card-1"
    assert handler.last_json() == {"exp_year": 2031}

    await api.delete(card_id="card-1")
    assert handler.last.method == "DELETE"


async def test_get_stripe_key(make_client):
    """The Stripe publishable key is unwrapped from its envelope."""
    client, handler = make_client(json_body={"stripe_key": "pk_test_123"})

    key = await client.payment().get_stripe_key()

    assert handler.last.url.path == "/v1/config/stripe_key"
    assert key == "pk_test_123"
