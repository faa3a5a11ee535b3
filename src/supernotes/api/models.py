"""Data models for cards and access tokens."""

import uuid
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, SecretStr

from supernotes.utils.text import render_markdown


@dataclass
class Card:
    """A single card: name, Markdown source and rendered HTML."""

    name: str
    markup: str
    html: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "markup": self.markup,
            "html": self.html,
        }


@dataclass
class CardPayload:
    """Request body for creating a card, wrapped in an envelope with its own id."""

    card: Card
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def build(cls, name: str, markup: str) -> "CardPayload":
        """
        Build a payload for a new card.

        Both the envelope id and the card id are freshly generated
        version 4 UUIDs. The HTML is rendered from the markup.

        Args:
            name: Card name.
            markup: Markdown content.

        Returns:
            Payload ready to be serialized with to_dict().
        """
        card = Card(name=name, markup=markup, html=render_markdown(markup))
        return cls(card=card)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the JSON structure expected by the cards endpoint.

        Returns:
            Dict with top-level "id" and nested "card".
        """
        return {
            "id": self.id,
            "card": self.card.to_dict(),
        }


def card_data(name: str, markup: str) -> dict[str, Any]:
    """
    Return data suitable for creating a new card.

    Examples:
        >>> data = card_data("Card name", "* item")
        >>> data["card"]["html"]
        '<ul>\\n<li>item</li>\\n</ul>\\n'
    """
    return CardPayload.build(name, markup).to_dict()


class TokenResponse(BaseModel):
    """OAuth2 token endpoint response."""

    model_config = ConfigDict(extra="ignore")

    access_token: SecretStr
    token_type: str
    expires_in: float | None = None
    refresh_token: SecretStr | None = None
    scope: str | list[str] | None = None

    def secret(self) -> str:
        """Return the raw access token for use in an Authorization header."""
        return self.access_token.get_secret_value()
