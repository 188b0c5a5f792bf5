"""GameSense HTTP client.

Sends JSON payloads to the local SteelSeries GameSense daemon. Every
request is a single attempt: failures surface immediately as
TransportError or APIError.
"""

import json
import logging
from types import TracebackType
from typing import Any, Self

import requests

from keylight.constants import (
    ENDPOINT_BIND_EVENT,
    ENDPOINT_GAME_EVENT,
    ENDPOINT_GAME_METADATA,
    HTTP_OK,
)
from keylight.exceptions import APIError, EncodingError, TransportError
from keylight.models import (
    Bitmap,
    bind_event_payload,
    bitmap_event_payload,
    game_metadata_payload,
)

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def encode_payload(payload: dict[str, Any]) -> str:
    """Serialize a payload to JSON.

    Raises:
        EncodingError: If the payload holds values JSON cannot represent.
    """
    try:
        return json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError) as e:
        msg = f"failed to marshal JSON: {e}"
        raise EncodingError(msg) from e


def post(
    address: str,
    endpoint: str,
    payload: dict[str, Any],
    *,
    session: Any = None,
    timeout: float | None = None,
) -> None:
    """POST a JSON payload to the GameSense daemon.

    Args:
        address: Daemon address as ``host:port``.
        endpoint: API endpoint (e.g., "/game_event").
        payload: JSON-compatible request body.
        session: Optional requests.Session to send through.
        timeout: Optional request timeout; None keeps the requests default.

    Raises:
        EncodingError: If the payload cannot be serialized.
        TransportError: If the request cannot be sent.
        APIError: If the daemon answers with a status other than 200.
    """
    body = encode_payload(payload)
    url = f"http://{address}{endpoint}"
    sender = session if session is not None else requests

    logger.debug("POST %s (%d bytes)", url, len(body))
    try:
        response = sender.post(url, data=body, headers=JSON_HEADERS, timeout=timeout)
    except requests.RequestException as e:
        msg = f"failed to send request: {e}"
        raise TransportError(msg) from e

    if response.status_code != HTTP_OK:
        raise APIError(response.status_code, response.text)


class GameSenseClient:
    """Session-backed client bound to one daemon address.

    Usage:
        with GameSenseClient("127.0.0.1:5678") as client:
            client.register_game()
            client.bind_event()
            client.send_bitmap(Bitmap.filled((255, 0, 0)))
    """

    def __init__(
        self,
        address: str,
        session: Any = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            address: Daemon address as ``host:port``.
            session: Optional requests.Session. A session passed in is left
                open on exit; one created here is closed.
            timeout: Optional request timeout in seconds.
        """
        self.address = address
        self._timeout = timeout
        self._owns_session = session is None
        self._session: Any = session if session is not None else requests.Session()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session and self._session is not None:
            self._session.close()
        self._session = None

    def post(self, endpoint: str, payload: dict[str, Any]) -> None:
        """POST a payload to this client's daemon. See post()."""
        if self._session is None:
            msg = "failed to send request: client is closed"
            raise TransportError(msg)
        post(
            self.address,
            endpoint,
            payload,
            session=self._session,
            timeout=self._timeout,
        )

    def register_game(self) -> None:
        """Register the keylight game with GameSense."""
        self.post(ENDPOINT_GAME_METADATA, game_metadata_payload())

    def bind_event(self) -> None:
        """Bind the keyboard color event handler."""
        self.post(ENDPOINT_BIND_EVENT, bind_event_payload())

    def send_bitmap(self, bitmap: Bitmap) -> None:
        """Push a per-key bitmap to the keyboard."""
        self.post(ENDPOINT_GAME_EVENT, bitmap_event_payload(bitmap))
