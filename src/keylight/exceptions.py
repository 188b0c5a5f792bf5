"""Custom exceptions for keylight."""


class KeylightError(Exception):
    """Base exception for keylight errors."""


class DiscoveryError(KeylightError):
    """Raised when the GameSense address cannot be discovered."""


class DiscoveryUnavailable(DiscoveryError):  # noqa: N818
    """Raised when the discovery file cannot be opened or read."""


class DiscoveryMalformed(DiscoveryError):  # noqa: N818
    """Raised when the discovery file is not a valid JSON object."""


class DiscoveryIncomplete(DiscoveryError):  # noqa: N818
    """Raised when the discovery file has no usable address."""

    def __init__(self, message: str = "address not found in coreProps.json") -> None:
        super().__init__(message)


class EncodingError(KeylightError):
    """Raised when a request payload cannot be serialized to JSON."""


class TransportError(KeylightError):
    """Raised when the request cannot reach the GameSense daemon."""


class APIError(KeylightError):
    """Raised when the GameSense daemon answers with a non-200 status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"API returned status {status}: {body}")


class StepFailedError(KeylightError):
    """Raised when a step of the lighting sequence fails.

    Wraps the underlying error and names the step it came from.
    """

    def __init__(self, step: str, cause: KeylightError) -> None:
        self.step = step
        self.cause = cause
        super().__init__(f"Failed to {step}: {cause}")


class HueConfigError(KeylightError):
    """Raised when the Hue bridge config cannot be loaded."""
