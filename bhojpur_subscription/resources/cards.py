from __future__ import annotations

from ..client import SubscriptionClient
from ..models import Card, DeleteResponse
from ..params import CardParams
from ..utils import escape_id, resource_path


class CardsAPI:
    """Cards stored on a customer."""

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def create(self, customer_id: str, card: CardParams) -> Card:
        self.client.trace("cards.create()", {"customer_id": customer_id, "network": card.network.value})
        path = resource_path("customers", escape_id(customer_id), "cards")
        return self.client.post(path, card.to_params(), Card)

    def delete(self, customer_id: str, card_id: str) -> DeleteResponse:
        self.client.trace("cards.delete()", {"customer_id": customer_id, "card_id": card_id})
        path = resource_path("customers", escape_id(customer_id), "cards", escape_id(card_id))
        return self.client.delete(path, [], DeleteResponse)
