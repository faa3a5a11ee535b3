"""OAuth2 password grant against the Supernotes login endpoint."""

import logging

import requests
from pydantic import SecretStr, ValidationError

from supernotes.api.models import TokenResponse
from supernotes.config import CLIENT_ID, DEFAULT_TIMEOUT, LOGIN_PATH, endpoint_url, normalize_base_url
from supernotes.errors import AuthenticationError

logger = logging.getLogger(__name__)


def get_token(
    base_url: str,
    username: str,
    password: SecretStr | str,
    timeout: float = DEFAULT_TIMEOUT,
) -> TokenResponse:
    """
    Exchange a username and password for an access token.

    Sends a single form-encoded POST to ``<base_url>user/login``.

    Args:
        base_url: API base URL.
        username: Account username.
        password: Account password.
        timeout: Seconds to wait for the response.

    Returns:
        Parsed token response. Use ``.secret()`` for the bearer token.

    Raises:
        InputError: If base_url is malformed.
        AuthenticationError: On transport failure, non-2xx status or a
            response without access_token and token_type.

    Example:
        ```python
        token = get_token("https://example.com", "username", "password")
        headers = {"Authorization": f"Bearer {token.secret()}"}
        ```
    """
    token_url = endpoint_url(normalize_base_url(base_url), LOGIN_PATH)
    if isinstance(password, SecretStr):
        password = password.get_secret_value()

    # Key order is the order of the form-encoded body
    form = {
        "grant_type": "password",
        "username": username,
        "password": password,
    }
    headers = {
        "content-type": "application/x-www-form-urlencoded",
        "accept": "application/json",
    }

    logger.info(f"Requesting access token from {token_url}")
    try:
        response = requests.post(
            token_url,
            data=form,
            headers=headers,
            auth=(CLIENT_ID, ""),
            timeout=timeout,
        )
        response.raise_for_status()
        token = TokenResponse.model_validate(response.json())
    except (requests.RequestException, ValueError) as e:
        # ValueError covers both invalid JSON and pydantic's ValidationError
        raise AuthenticationError("error getting access token") from _describe(e)

    logger.info(f"Received {token.token_type} access token")
    return token


def _describe(exc: Exception) -> Exception:
    """Return the exception to report as the cause of an authentication failure."""
    if not isinstance(exc, ValidationError):
        return exc

    fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
    if fields:
        message = f"malformed token response (missing or invalid: {fields})"
    else:
        message = "malformed token response (expected a JSON object)"

    described = ValueError(message)
    described.__cause__ = exc
    return described
