"""Exception types raised by the Supernotes client."""


class SupernotesError(Exception):
    """Base class for all client errors."""


class InputError(SupernotesError, ValueError):
    """Invalid configuration or command input, detected before any network call."""


class ContentReadError(SupernotesError):
    """Card content could not be read from a file or stdin."""


class AuthenticationError(SupernotesError):
    """The access token exchange failed."""


class SubmissionError(SupernotesError):
    """The card creation request failed."""


class CardCreationError(SupernotesError):
    """Wraps any failure of the create command."""


def format_error_chain(exc: BaseException) -> str:
    """
    Join an exception's message with the messages of its causes.

    Args:
        exc: Outermost exception.

    Returns:
        Messages separated by ": ", outermost first.

    Examples:
        >>> try:
        ...     try:
        ...         raise OSError("connection refused")
        ...     except OSError as e:
        ...         raise AuthenticationError("error getting access token") from e
        ... except AuthenticationError as e:
        ...     format_error_chain(e)
        'error getting access token: connection refused'
    """
    messages: list[str] = []
    current: BaseException | None = exc
    while current is not None:
        message = str(current) or type(current).__name__
        messages.append(message)
        current = current.__cause__
    return ": ".join(messages)
