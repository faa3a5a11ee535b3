"""High-level API for creating cards from Markdown content."""

import logging
from pathlib import Path

import requests

from supernotes.api.client import SupernotesClient
from supernotes.api.models import CardPayload
from supernotes.config import Config
from supernotes.errors import CardCreationError, SupernotesError
from supernotes.utils.text import read_content

logger = logging.getLogger(__name__)


def create_card_from_source(
    config: Config,
    name: str,
    source: Path | None = None,
) -> requests.Response:
    """
    Read Markdown content and create a card from it.

    Steps, in order: read the content, get an access token, build the
    payload, submit it. The first failure aborts the command; nothing is
    retried.

    Args:
        config: Configuration with base URL and credentials (from load_config()).
        name: Name of the new card.
        source: Markdown file. If None, content is read from stdin.

    Returns:
        Response of the card creation request.

    Raises:
        CardCreationError: If any step fails. The original error is its cause.

    Example:
        ```python
        from supernotes import create_card_from_source, load_config

        config = load_config(username="me", password="secret")
        create_card_from_source(config, "Shopping", Path("list.md"))
        ```
    """
    client = SupernotesClient(config)

    try:
        content = read_content(source)
        token = client.authenticate()
        payload = CardPayload.build(name, content)
        response = client.create_card(token, payload)
    except SupernotesError as e:
        raise CardCreationError("error creating card") from e

    logger.info(f"Created card '{name}' ({payload.card.id})")
    return response
