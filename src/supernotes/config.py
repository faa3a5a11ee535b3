"""Configuration loading and validation."""

import tomllib
from pathlib import Path
from typing import Any
from urllib.parse import urljoin, urlparse

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from supernotes.errors import InputError

DEFAULT_BASE_URL = "https://api.supernotes.app/v1/"
DEFAULT_TIMEOUT = 30.0

# OAuth2 client placeholders. The password grant never visits the
# authorization endpoint and the service does not check the client id.
CLIENT_ID = "unused"
AUTH_URL = "http://127.0.0.1/unused"

LOGIN_PATH = "user/login"
CARDS_PATH = "cards/"


def normalize_base_url(url: str) -> str:
    """
    Validate an API base URL and make sure it ends with a slash.

    Args:
        url: Absolute http or https URL.

    Returns:
        The URL with a trailing "/".

    Raises:
        InputError: If the URL is not absolute or uses another scheme.

    Examples:
        >>> normalize_base_url("https://example.com")
        'https://example.com/'
        >>> normalize_base_url("https://example.com/v1/")
        'https://example.com/v1/'
    """
    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InputError(f"invalid base URL '{url}': expected an absolute http(s) URL")

    if not url.endswith("/"):
        url = f"{url}/"
    return url


def endpoint_url(base_url: str, path: str) -> str:
    """
    Resolve an endpoint path against a normalized base URL.

    Examples:
        >>> endpoint_url("https://example.com/", "user/login")
        'https://example.com/user/login'
    """
    return urljoin(base_url, path)


class Config(BaseModel):
    """Supernotes API configuration and credentials."""

    base_url: str = DEFAULT_BASE_URL
    username: str = Field(min_length=1)
    password: SecretStr
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """Seconds to wait for each HTTP request."""

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        # InputError is a ValueError, so pydantic reports it as a validation error
        return normalize_base_url(value)

    @property
    def cards_url(self) -> str:
        return endpoint_url(self.base_url, CARDS_PATH)


def load_config(config_path: Path | None = None, **overrides: Any) -> Config:
    """
    Load configuration from an optional TOML file plus explicit values.

    The file holds a ``[supernotes]`` table with any of ``base_url``,
    ``username``, ``password`` and ``timeout``. Overrides that are not None
    take precedence over the file.

    Args:
        config_path: Path to a TOML config file, or None to skip the file.
        **overrides: Values from the command line or environment.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist.
        InputError: If the resulting configuration is invalid.
    """
    values: dict[str, Any] = {}

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
            raise InputError(f"invalid config file {config_path}: {e}") from e

        section = data.get("supernotes", {})
        if not isinstance(section, dict):
            raise InputError(f"invalid config file {config_path}: [supernotes] must be a table")
        values.update(section)

    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return Config(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InputError(f"invalid configuration: {problems}") from e
