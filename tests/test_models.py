"""Tests for models module."""

import pytest

from keylight.constants import HIGHLIGHT_COLOR, KEY_COUNT, OFF_COLOR
from keylight.models import (
    Bitmap,
    bind_event_payload,
    bitmap_event_payload,
    game_metadata_payload,
)


class TestBitmap:
    """Tests for Bitmap dataclass."""

    def test_filled_has_key_count_entries(self) -> None:
        """A filled bitmap should cover every key."""
        bitmap = Bitmap.filled(HIGHLIGHT_COLOR)
        assert len(bitmap.keys) == KEY_COUNT == 132
        assert all(color == HIGHLIGHT_COLOR for color in bitmap.keys)

    def test_clear_bitmap_json(self) -> None:
        """An off bitmap should serialize to 132 black triples."""
        data = Bitmap.filled(OFF_COLOR).to_json()
        assert len(data) == 132
        assert all(entry == [0, 0, 0] for entry in data)

    def test_custom_key_count(self) -> None:
        """Key count should be overridable."""
        assert len(Bitmap.filled((0, 0, 255), key_count=4).to_json()) == 4

    def test_rejects_short_bitmap(self) -> None:
        """Should reject a bitmap with fewer keys than key_count."""
        with pytest.raises(ValueError, match="exactly 132 keys"):
            Bitmap(keys=((0, 0, 0),) * 131)

    def test_rejects_two_channel_color(self) -> None:
        """Each entry needs exactly three channels."""
        with pytest.raises(ValueError, match="3 channels"):
            Bitmap.filled((0, 0))  # type: ignore[arg-type]

    @pytest.mark.parametrize("color", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
    def test_rejects_bad_channel(self, color: tuple) -> None:
        """Channels must be ints in 0-255."""
        with pytest.raises(ValueError):
            Bitmap.filled(color)

    def test_immutable(self) -> None:
        """Bitmaps should be frozen."""
        bitmap = Bitmap.filled(OFF_COLOR)
        with pytest.raises(AttributeError):
            bitmap.keys = ()  # type: ignore[misc]


class TestPayloads:
    """Tests for payload builders."""

    def test_game_metadata(self) -> None:
        """Should identify the game and developer."""
        assert game_metadata_payload() == {
            "game": "KEYLIGHT",
            "game_display_name": "Keylight",
            "developer": "mimikun",
        }

    def test_bind_event(self) -> None:
        """Should declare one keyboard color handler."""
        payload = bind_event_payload()
        assert payload["game"] == "KEYLIGHT"
        assert payload["event"] == "KEYBOARD_CONTROL"
        assert payload["handlers"] == [
            {"device-type": "keyboard", "zone": "all", "mode": "color"}
        ]

    def test_bitmap_event(self) -> None:
        """Should wrap the bitmap under data.bitmap."""
        payload = bitmap_event_payload(Bitmap.filled(HIGHLIGHT_COLOR))
        assert payload["game"] == "KEYLIGHT"
        assert payload["event"] == "KEYBOARD_CONTROL"
        assert payload["data"]["bitmap"] == [[255, 0, 0]] * 132

    def test_payloads_are_fresh(self) -> None:
        """Each call should build a new payload."""
        assert bind_event_payload() is not bind_event_payload()
