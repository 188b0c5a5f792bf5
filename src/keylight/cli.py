"""Command-line interface for keylight."""

import argparse
import logging
import sys
from pathlib import Path

from keylight import __version__
from keylight.discovery import resolve_service_address
from keylight.exceptions import KeylightError, StepFailedError
from keylight.hue import Action, load_config, parse_action, scenes_for
from keylight.orchestrator import LightingSettings, run_sequence

MAIN_EPILOG = """\
examples:
  keylight run                       Light all keys red for 10 seconds
  keylight run --hold 3              Hold the lights for 3 seconds
  keylight address                   Show the GameSense daemon address
  keylight hue -c hue.json --success Show the scene used on success

Requires SteelSeries Engine / GG to be running.
Use -h with any command for detailed help.
"""

RUN_EPILOG = """\
sequence:
  register game, bind event, turn off keys, light keys,
  wait, turn off keys.

The first failing step aborts the run with exit status 1.
"""

HUE_EPILOG = """\
actions:
  --success        success notification scene
  --failure        failure notification scene
  --init-scenes    every configured scene
"""


def cmd_run(args: argparse.Namespace) -> int:
    """Run the lighting sequence."""
    try:
        settings = LightingSettings(hold_seconds=args.hold)
    except ValueError as e:
        print(f"Error: {e}.", file=sys.stderr)
        return 1

    try:
        run_sequence(
            settings,
            core_props=args.core_props,
            status=print,
        )
        return 0

    except StepFailedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 1


def cmd_address(args: argparse.Namespace) -> int:
    """Print the GameSense daemon address."""
    try:
        print(resolve_service_address(args.core_props))
        return 0

    except KeylightError as e:
        print(f"Error: Failed to get GameSense address: {e}", file=sys.stderr)
        return 1


def cmd_hue(args: argparse.Namespace) -> int:
    """Print the Hue scene names for a notification action."""
    try:
        config = load_config(args.config)
    except KeylightError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    action = parse_action([args.action_flag])
    for scene in scenes_for(config, action):
        print(scene or "(not configured)")
    return 0


def _add_core_props_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--core-props",
        type=Path,
        metavar="FILE",
        default=None,
        help="coreProps.json to read instead of the platform default",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="keylight",
        description="Keyboard lighting through SteelSeries GameSense.",
        epilog=MAIN_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log each request and discovery step",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="commands",
        metavar="<command>",
    )

    # run subcommand
    run_parser = subparsers.add_parser(
        "run",
        help="light the keyboard, wait, then turn it off",
        description="Register with GameSense and light every key for a while.",
        epilog=RUN_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    run_parser.add_argument(
        "--hold",
        type=float,
        metavar="SEC",
        default=LightingSettings().hold_seconds,
        help="seconds to keep the keys lit (default: %(default)g)",
    )
    _add_core_props_argument(run_parser)
    run_parser.set_defaults(func=cmd_run)

    # address subcommand
    address_parser = subparsers.add_parser(
        "address",
        help="print the GameSense daemon address",
        description="Read coreProps.json and print the daemon address.",
    )
    _add_core_props_argument(address_parser)
    address_parser.set_defaults(func=cmd_address)

    # hue subcommand
    hue_parser = subparsers.add_parser(
        "hue",
        help="show the Hue scenes for a notification action",
        description="Load a Hue bridge config and print the scenes an action uses.",
        epilog=HUE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    hue_parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        required=True,
        help="Hue bridge config (JSON)",
    )
    actions = hue_parser.add_mutually_exclusive_group(required=True)
    for action in Action:
        actions.add_argument(
            action.flag,
            dest="action_flag",
            action="store_const",
            const=action.flag,
        )
    hue_parser.set_defaults(func=cmd_hue)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
