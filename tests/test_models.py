"""Tests for card payload construction."""

import uuid

from supernotes.api.models import CardPayload, TokenResponse, card_data


def _is_uuid4(value) -> bool:
    return isinstance(value, str) and uuid.UUID(value).version == 4


def test_card_data():
    card = card_data("card name", "* item")
    assert _is_uuid4(card["id"])
    assert _is_uuid4(card["card"]["id"])
    assert card["card"]["name"] == "card name"
    assert card["card"]["markup"] == "* item"
    assert card["card"]["html"] == "<ul>\n<li>item</li>\n</ul>\n"


def test_payload_field_names():
    payload = CardPayload.build("name", "markup").to_dict()
    assert set(payload) == {"id", "card"}
    assert set(payload["card"]) == {"id", "name", "markup", "html"}


def test_ids_are_fresh_and_independent():
    payloads = [CardPayload.build("name", "same content") for _ in range(20)]
    ids = {p.id for p in payloads} | {p.card.id for p in payloads}
    assert len(ids) == 40
    for payload in payloads:
        assert payload.id != payload.card.id


def test_html_matches_markup():
    payload = CardPayload.build("Card title", "Card body")
    assert payload.card.html == "<p>Card body</p>\n"


class TestTokenResponse:
    def test_secret(self):
        token = TokenResponse.model_validate({"access_token": "token", "token_type": "bearer"})
        assert token.secret() == "token"

    def test_secret_is_redacted(self):
        token = TokenResponse.model_validate(
            {"access_token": "acc3ss-s3cret", "token_type": "bearer", "refresh_token": "r3fr3sh-s3cret"}
        )
        for text in (repr(token), str(token)):
            assert "acc3ss-s3cret" not in text
            assert "r3fr3sh-s3cret" not in text

    def test_extra_fields_ignored(self):
        token = TokenResponse.model_validate(
            {"access_token": "token", "token_type": "bearer", "expires_in": 3600, "user": {}}
        )
        assert token.expires_in == 3600

    def test_lenient_optional_fields(self):
        token = TokenResponse.model_validate(
            {"access_token": "token", "token_type": "bearer", "expires_in": 3599.5, "scope": ["cards"]}
        )
        assert token.secret() == "token"
        assert token.expires_in == 3599.5
        assert token.scope == ["cards"]
