"""Fixed GameSense lighting sequence.

Runs, in order and exactly once:

1. Resolve the daemon address from coreProps.json
2. Register the game
3. Bind the keyboard color event
4. Turn off all keys
5. Light the keys
6. Hold for a fixed duration (blocking)
7. Turn off all keys again

The first failure aborts the run. Nothing is retried or rolled back.
"""

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from keylight.client import GameSenseClient
from keylight.constants import HIGHLIGHT_COLOR, HOLD_SECONDS, KEY_COUNT, OFF_COLOR
from keylight.discovery import resolve_service_address
from keylight.exceptions import KeylightError, StepFailedError
from keylight.models import Bitmap, Color

logger = logging.getLogger(__name__)

T = TypeVar("T")

STEP_DISCOVER = "get GameSense address"
STEP_REGISTER = "register game"
STEP_BIND = "bind event"
STEP_CLEAR = "turn off keys"
STEP_LIGHT = "light HJKL keys"


@dataclass(frozen=True, slots=True)
class LightingSettings:
    """Tunable values for one lighting run."""

    key_count: int = KEY_COUNT
    highlight_color: Color = HIGHLIGHT_COLOR
    off_color: Color = OFF_COLOR
    hold_seconds: float = HOLD_SECONDS

    def __post_init__(self) -> None:
        if not math.isfinite(self.hold_seconds):
            msg = f"Hold duration must be a finite number: {self.hold_seconds}"
            raise ValueError(msg)
        if self.hold_seconds < 0:
            msg = f"Hold duration cannot be negative: {self.hold_seconds}"
            raise ValueError(msg)
        # Fail at construction rather than mid-sequence
        self.clear_bitmap()
        self.highlight_bitmap()

    def clear_bitmap(self) -> Bitmap:
        """Bitmap with every key off."""
        return Bitmap.filled(self.off_color, self.key_count)

    def highlight_bitmap(self) -> Bitmap:
        """Bitmap with every key set to the highlight color.

        Lights the whole keyboard, not just H/J/K/L.
        """
        return Bitmap.filled(self.highlight_color, self.key_count)


DEFAULT_SETTINGS = LightingSettings()


def _run_step(step: str, func: Callable[[], T]) -> T:
    logger.debug("Step: %s", step)
    try:
        return func()
    except KeylightError as e:
        raise StepFailedError(step, e) from e


def run_sequence(
    settings: LightingSettings = DEFAULT_SETTINGS,
    *,
    core_props: Path | None = None,
    sleep: Callable[[float], Any] | None = None,
    session: Any = None,
    status: Callable[[str], Any] | None = None,
) -> None:
    """Run the lighting sequence once.

    Args:
        settings: Key count, colors and hold duration.
        core_props: Discovery file to read instead of the platform default.
        sleep: Blocking delay called once with ``settings.hold_seconds``.
            Defaults to time.sleep.
        session: Optional requests.Session to send through.
        status: Optional callback receiving progress messages.

    Raises:
        StepFailedError: If any step fails; ``step`` names it and
            ``cause`` holds the underlying error.
    """
    report = status if status is not None else (lambda _msg: None)
    delay = sleep if sleep is not None else time.sleep

    address = _run_step(STEP_DISCOVER, lambda: resolve_service_address(core_props))

    with GameSenseClient(address, session=session) as client:
        _run_step(STEP_REGISTER, client.register_game)
        _run_step(STEP_BIND, client.bind_event)
        _run_step(STEP_CLEAR, lambda: client.send_bitmap(settings.clear_bitmap()))
        _run_step(STEP_LIGHT, lambda: client.send_bitmap(settings.highlight_bitmap()))

        report(f"Keys lit for {settings.hold_seconds:g} seconds...")
        delay(settings.hold_seconds)

        _run_step(STEP_CLEAR, lambda: client.send_bitmap(settings.clear_bitmap()))

    report("Done!")
