"""Supernotes API client, authentication and card models."""

from supernotes.api.auth import get_token
from supernotes.api.builder import create_card_from_source
from supernotes.api.client import SupernotesClient
from supernotes.api.models import Card, CardPayload, TokenResponse, card_data

__all__ = [
    "Card",
    "CardPayload",
    "TokenResponse",
    "SupernotesClient",
    "card_data",
    "create_card_from_source",
    "get_token",
]
