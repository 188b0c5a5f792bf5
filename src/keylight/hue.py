"""Hue bridge notification config.

Loads the bridge/scene config used for success and failure
notifications and maps command-line actions to the scenes they use.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from keylight.exceptions import HueConfigError

logger = logging.getLogger(__name__)


class Action(Enum):
    """Notification actions selectable from the command line."""

    SUCCESS = "success"
    FAILURE = "failure"
    INIT_SCENES = "init-scenes"

    @property
    def flag(self) -> str:
        """Command-line flag for this action."""
        return f"--{self.value}"


@dataclass(frozen=True, slots=True)
class SceneConfig:
    """Scene names on the bridge."""

    default_scene: str = ""
    success_scene: str = ""
    failure_scene: str = ""


@dataclass(frozen=True, slots=True)
class HueConfig:
    """Hue bridge connection and scene settings."""

    bridge_ip: str = ""
    username: str = ""
    scenes: SceneConfig = field(default_factory=SceneConfig)
    auto_create_scenes: bool = False


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"failed to decode JSON config: {key} must be a string"
        raise HueConfigError(msg)
    return value


def load_config(path: Path) -> HueConfig:
    """Load a Hue config file.

    Missing or null fields keep their empty defaults.

    Args:
        path: JSON config file.

    Returns:
        The parsed config.

    Raises:
        HueConfigError: If the file cannot be read or is not valid JSON.
    """
    try:
        with path.open("rb") as f:
            contents = f.read()
    except OSError as e:
        msg = f"failed to open config file: {e}"
        raise HueConfigError(msg) from e

    try:
        data = json.loads(contents)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"failed to decode JSON config: {e}"
        raise HueConfigError(msg) from e

    if not isinstance(data, dict):
        msg = "failed to decode JSON config: expected a JSON object"
        raise HueConfigError(msg)

    scenes = data.get("scenes")
    if scenes is None:
        scenes = {}
    if not isinstance(scenes, dict):
        msg = "failed to decode JSON config: scenes must be an object"
        raise HueConfigError(msg)

    auto_create = data.get("auto_create_scenes")
    if auto_create is None:
        auto_create = False
    if not isinstance(auto_create, bool):
        msg = "failed to decode JSON config: auto_create_scenes must be a boolean"
        raise HueConfigError(msg)

    logger.debug("Loaded Hue config from %s", path)
    return HueConfig(
        bridge_ip=_str(data, "bridge_ip"),
        username=_str(data, "username"),
        scenes=SceneConfig(
            default_scene=_str(scenes, "default_scene"),
            success_scene=_str(scenes, "success_scene"),
            failure_scene=_str(scenes, "failure_scene"),
        ),
        auto_create_scenes=auto_create,
    )


def parse_action(args: list[str]) -> Action:
    """Pick the action named by the first argument.

    Raises:
        ValueError: If no argument is given or it is not a known flag.
    """
    if not args:
        msg = "no arguments provided"
        raise ValueError(msg)
    for action in Action:
        if args[0] == action.flag:
            return action
    msg = f"invalid argument: {args[0]}"
    raise ValueError(msg)


def scenes_for(config: HueConfig, action: Action) -> tuple[str, ...]:
    """Return the scene names an action uses."""
    if action == Action.SUCCESS:
        return (config.scenes.success_scene,)
    if action == Action.FAILURE:
        return (config.scenes.failure_scene,)
    return (
        config.scenes.default_scene,
        config.scenes.success_scene,
        config.scenes.failure_scene,
    )
