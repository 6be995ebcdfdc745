import argparse
import sys
from typing import List, Optional

from loguru import logger

from src.core.config import ConfigManager
from src.core.exceptions import ConfigurationError
from src.core.logging import setup_logging
from src.core.commands import CompositeAction, Dispatcher
from src.devices import Light, Television, on_action, off_action


def build_remote(config: ConfigManager):
    """Wire the demo devices into a dispatcher."""
    living_room = Light("Living room")
    tv = Television("LG")

    light_on, light_off = on_action(living_room), off_action(living_room)
    tv_on, tv_off = on_action(tv), off_action(tv)

    remote = Dispatcher.from_settings(config.data.dispatcher)
    remote.bind(0, light_on, light_off)
    remote.bind(1, tv_on, tv_off)
    # Macro has no inverse button; undo still reverses it
    remote.bind(2, CompositeAction([light_off, tv_off], "All off"))
    return remote, living_room, tv


def run_demo(remote: Dispatcher, verbose: bool = True) -> None:
    say = print if verbose else (lambda *_: None)

    say("--- 1. Light ---")
    remote.press_on(0)
    remote.press_off(0)
    remote.press_undo()

    say("--- 2. TV ---")
    remote.press_on(1)
    remote.press_off(1)

    say("--- 3. All off macro ---")
    remote.press_on(2)
    remote.press_undo()

    say("--- 4. Log ---")
    remote.show_log()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Remote control dispatch demo")
    parser.add_argument("--config", default=None, help="JSON or TOML settings file")
    parser.add_argument("--quiet", action="store_true", help="Only print the log")
    args = parser.parse_args(argv)

    try:
        config = ConfigManager(args.config)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(config.data.general.debug_mode, config.data.general.log_dir)
    if args.quiet:
        logger.remove()

    remote, living_room, tv = build_remote(config)
    run_demo(remote, verbose=not args.quiet)
    logger.debug(f"Final state: {living_room}, {tv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
