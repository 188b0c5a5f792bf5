"""Constants for GameSense keyboard lighting."""

from pathlib import Path
from typing import Final

# GameSense registration
GAME_NAME: Final[str] = "KEYLIGHT"
GAME_DISPLAY_NAME: Final[str] = "Keylight"
DEVELOPER: Final[str] = "mimikun"
EVENT_NAME: Final[str] = "KEYBOARD_CONTROL"

# API endpoints
ENDPOINT_GAME_METADATA: Final[str] = "/game_metadata"
ENDPOINT_BIND_EVENT: Final[str] = "/bind_game_event"
ENDPOINT_GAME_EVENT: Final[str] = "/game_event"

HTTP_OK: Final[int] = 200

# Per-key bitmap size for full-size keyboards
KEY_COUNT: Final[int] = 132

# RGB colors
OFF_COLOR: Final[tuple[int, int, int]] = (0, 0, 0)
HIGHLIGHT_COLOR: Final[tuple[int, int, int]] = (255, 0, 0)

# Seconds the keys stay lit before being cleared again
HOLD_SECONDS: Final[float] = 10.0

# SteelSeries Engine / GG discovery file
CORE_PROPS_ENV: Final[str] = "KEYLIGHT_CORE_PROPS"
CORE_PROPS_WINDOWS: Final[Path] = Path(
    r"C:\ProgramData\SteelSeries\SteelSeries Engine 3\coreProps.json"
)
CORE_PROPS_MACOS: Final[Path] = (
    Path.home() / "Library/Application Support/SteelSeries Engine 3/coreProps.json"
)
