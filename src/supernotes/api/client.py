"""Supernotes REST API client."""

import logging

import requests

from supernotes.api.auth import get_token
from supernotes.api.models import CardPayload, TokenResponse
from supernotes.config import Config
from supernotes.errors import SubmissionError

logger = logging.getLogger(__name__)


class SupernotesClient:
    """Client for the Supernotes cards API."""

    def __init__(self, config: Config) -> None:
        """
        Initialize Supernotes client.

        Args:
            config: Configuration with base URL, credentials and timeout.
        """
        self.config = config

    def authenticate(self) -> TokenResponse:
        """
        Get an access token for the configured user.

        Returns:
            Token response from the login endpoint.

        Raises:
            AuthenticationError: If the token exchange fails.
        """
        return get_token(
            self.config.base_url,
            self.config.username,
            self.config.password,
            timeout=self.config.timeout,
        )

    def create_card(self, token: TokenResponse | str, payload: CardPayload) -> requests.Response:
        """
        Create a new card.

        Args:
            token: Access token, either a token response or the raw secret.
            payload: Card payload built with CardPayload.build().

        Returns:
            Raw HTTP response from the cards endpoint.

        Raises:
            SubmissionError: On transport failure or a non-2xx status.
        """
        secret = token.secret() if isinstance(token, TokenResponse) else token

        headers = {
            "content-type": "application/json",
            "authorization": f"Bearer {secret}",
            "accept": "application/json",
        }

        logger.info(f"Creating card '{payload.card.name}' at {self.config.cards_url}")
        try:
            response = requests.post(
                self.config.cards_url,
                json=payload.to_dict(),
                headers=headers,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise SubmissionError(f"could not create card '{payload.card.name}'") from e

        logger.info(f"Card created: HTTP {response.status_code}")
        return response
