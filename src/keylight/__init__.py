"""keylight - Light keyboard keys through SteelSeries GameSense.

This package registers with the local SteelSeries GameSense daemon and
pushes per-key RGB bitmaps to the keyboard.

Example:
    from keylight import LightingSettings, run_sequence

    run_sequence(LightingSettings(hold_seconds=3))
"""

__version__ = "1.0.0"

from keylight.client import GameSenseClient, post
from keylight.constants import HIGHLIGHT_COLOR, HOLD_SECONDS, KEY_COUNT, OFF_COLOR
from keylight.discovery import resolve_service_address
from keylight.exceptions import (
    APIError,
    DiscoveryError,
    DiscoveryIncomplete,
    DiscoveryMalformed,
    DiscoveryUnavailable,
    EncodingError,
    HueConfigError,
    KeylightError,
    StepFailedError,
    TransportError,
)
from keylight.hue import HueConfig, load_config
from keylight.models import Bitmap
from keylight.orchestrator import LightingSettings, run_sequence

__all__ = [
    "HIGHLIGHT_COLOR",
    "HOLD_SECONDS",
    "KEY_COUNT",
    "OFF_COLOR",
    "APIError",
    "Bitmap",
    "DiscoveryError",
    "DiscoveryIncomplete",
    "DiscoveryMalformed",
    "DiscoveryUnavailable",
    "EncodingError",
    "GameSenseClient",
    "HueConfig",
    "HueConfigError",
    "KeylightError",
    "LightingSettings",
    "StepFailedError",
    "TransportError",
    "__version__",
    "load_config",
    "post",
    "resolve_service_address",
    "run_sequence",
]
