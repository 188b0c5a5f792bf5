"""Locate the GameSense daemon through SteelSeries' coreProps.json."""

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from keylight.constants import CORE_PROPS_ENV, CORE_PROPS_MACOS, CORE_PROPS_WINDOWS
from keylight.exceptions import (
    DiscoveryIncomplete,
    DiscoveryMalformed,
    DiscoveryUnavailable,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CoreProps:
    """Address fields published by SteelSeries Engine / GG.

    Only ``address`` is used for connecting; the encrypted variants are
    kept for diagnostics.
    """

    address: str = ""
    encrypted_address: str = ""
    gg_encrypted_address: str = ""


def core_props_path() -> Path:
    """Return the discovery file path for this platform.

    ``KEYLIGHT_CORE_PROPS`` takes precedence when set.
    """
    override = os.environ.get(CORE_PROPS_ENV)
    if override:
        return Path(override)
    if sys.platform == "darwin":
        return CORE_PROPS_MACOS
    return CORE_PROPS_WINDOWS


def _string_field(data: dict, key: str) -> str:
    value = data.get(key, "")
    return value if isinstance(value, str) else ""


def read_core_props(path: Path | None = None) -> CoreProps:
    """Read and parse the discovery file.

    Args:
        path: Discovery file to read. Defaults to core_props_path().

    Returns:
        The parsed address fields.

    Raises:
        DiscoveryUnavailable: If the file cannot be opened or read.
        DiscoveryMalformed: If the file is not a JSON object.
    """
    if path is None:
        path = core_props_path()

    logger.debug("Reading %s", path)
    try:
        with path.open("rb") as f:
            contents = f.read()
    except OSError as e:
        msg = f"failed to open coreProps.json: {e}"
        raise DiscoveryUnavailable(msg) from e

    try:
        data = json.loads(contents)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"failed to parse coreProps.json: {e}"
        raise DiscoveryMalformed(msg) from e

    if not isinstance(data, dict):
        msg = "failed to parse coreProps.json: expected a JSON object"
        raise DiscoveryMalformed(msg)

    return CoreProps(
        address=_string_field(data, "address"),
        encrypted_address=_string_field(data, "encryptedAddress"),
        gg_encrypted_address=_string_field(data, "ggEncryptedAddress"),
    )


def resolve_service_address(path: Path | None = None) -> str:
    """Find the GameSense daemon address.

    Only the plain ``address`` field is considered. An empty address is an
    error even when encrypted variants are present.

    Args:
        path: Discovery file to read. Defaults to core_props_path().

    Returns:
        The ``host:port`` address string.

    Raises:
        DiscoveryUnavailable: If the file cannot be opened or read.
        DiscoveryMalformed: If the file is not a JSON object.
        DiscoveryIncomplete: If the address field is missing or empty.
    """
    props = read_core_props(path)
    if not props.address:
        raise DiscoveryIncomplete
    logger.debug("GameSense address: %s", props.address)
    return props.address
