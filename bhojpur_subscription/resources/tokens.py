from __future__ import annotations
from typing import Optional

from ..client import SubscriptionClient
from ..errors import SubscriptionAPIError
from ..models import Token
from ..params import CardParams
from ..utils import escape_id, resource_path


class TokensAPI:
    """
    Single-use card tokens.

    A token can be used once in place of raw card details, either to create
    a charge or to attach the card to a customer.
    """

    def __init__(self, client: SubscriptionClient):
        self.client = client

    def create(self, card: CardParams) -> Token:
        self.client.trace("tokens.create()", {"network": card.network.value})
        return self.client.post(resource_path("tokens"), card.to_params(), Token)

    def retrieve(self, token_id: str) -> Token:
        """
        Fetch a token by ID.

        Raises
        ------
        ValueError
            If token_id is empty.
        SubscriptionAPIError
            If the API rejects the request.
        """
        self.client.trace("tokens.retrieve()", {"token_id": token_id})
        return self.client.get(resource_path("tokens", escape_id(token_id)), None, Token)

    def try_retrieve(self, token_id: str) -> Optional[Token]:
        """
        Like `retrieve()` but returns None if the token does not exist (HTTP 404).
        Propagates other errors.
        """
        try:
            return self.retrieve(token_id)
        except SubscriptionAPIError as e:
            if e.status == 404:
                self.client.trace("tokens.try_retrieve: not found", {"token_id": token_id})
                return None
            raise
