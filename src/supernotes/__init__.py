"""Command-line client for Supernotes."""

__version__ = "0.1.0"

# High-level Python API
from supernotes.api import (
    Card,
    CardPayload,
    SupernotesClient,
    TokenResponse,
    card_data,
    create_card_from_source,
    get_token,
)
from supernotes.config import Config, load_config
from supernotes.errors import (
    AuthenticationError,
    CardCreationError,
    ContentReadError,
    InputError,
    SubmissionError,
    SupernotesError,
)

__all__ = [
    "Config",
    "load_config",
    "Card",
    "CardPayload",
    "SupernotesClient",
    "TokenResponse",
    "card_data",
    "create_card_from_source",
    "get_token",
    "AuthenticationError",
    "CardCreationError",
    "ContentReadError",
    "InputError",
    "SubmissionError",
    "SupernotesError",
]
