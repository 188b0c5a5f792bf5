"""Data models for keylight."""

from dataclasses import dataclass
from typing import Any

from keylight.constants import (
    DEVELOPER,
    EVENT_NAME,
    GAME_DISPLAY_NAME,
    GAME_NAME,
    KEY_COUNT,
)

Color = tuple[int, int, int]


def _check_color(color: Color) -> None:
    if len(color) != 3:  # noqa: PLR2004
        msg = f"Color must have exactly 3 channels, got {len(color)}"
        raise ValueError(msg)
    for channel in color:
        if not isinstance(channel, int) or isinstance(channel, bool):
            msg = f"Color channel must be an int, got {channel!r}"
            raise ValueError(msg)
        if not 0 <= channel <= 255:  # noqa: PLR2004
            msg = f"Color channel out of range 0-255: {channel}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Bitmap:
    """Per-key RGB colors for the whole keyboard.

    Always holds exactly ``key_count`` entries of exactly three channels.
    """

    keys: tuple[Color, ...]
    key_count: int = KEY_COUNT

    def __post_init__(self) -> None:
        if len(self.keys) != self.key_count:
            msg = f"Bitmap must have exactly {self.key_count} keys, got {len(self.keys)}"
            raise ValueError(msg)
        for color in self.keys:
            _check_color(color)

    @classmethod
    def filled(cls, color: Color, key_count: int = KEY_COUNT) -> "Bitmap":
        """Build a bitmap with every key set to the same color."""
        return cls(keys=(tuple(color),) * key_count, key_count=key_count)

    def to_json(self) -> list[list[int]]:
        """Return the bitmap as nested lists for the ``bitmap`` event field."""
        return [list(color) for color in self.keys]


def game_metadata_payload() -> dict[str, Any]:
    """Build the ``/game_metadata`` registration body."""
    return {
        "game": GAME_NAME,
        "game_display_name": GAME_DISPLAY_NAME,
        "developer": DEVELOPER,
    }


def bind_event_payload() -> dict[str, Any]:
    """Build the ``/bind_game_event`` body with one keyboard color handler."""
    return {
        "game": GAME_NAME,
        "event": EVENT_NAME,
        "handlers": [
            {
                "device-type": "keyboard",
                "zone": "all",
                "mode": "color",
            }
        ],
    }


def bitmap_event_payload(bitmap: Bitmap) -> dict[str, Any]:
    """Build the ``/game_event`` body carrying a bitmap."""
    return {
        "game": GAME_NAME,
        "event": EVENT_NAME,
        "data": {
            "bitmap": bitmap.to_json(),
        },
    }
