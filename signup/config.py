"""Configuration for the sign-up form.

Module-level defaults plus a small `argparse` front end so the settling
delays and logging level can be tuned from the command line.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

# Quiescence periods, in seconds
USERNAME_DELAY = 0.8
PASSWORD_EMPTY_DELAY = 0.8
PASSWORD_STRENGTH_DELAY = 0.2
PASSWORDS_MATCH_DELAY = 0.3

MIN_USERNAME_LENGTH = 3

WINDOW_TITLE = "Sign up"
WINDOW_WIDTH = 420
WINDOW_HEIGHT = 520

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


@dataclass
class Settings:
    username_delay: float = USERNAME_DELAY
    password_delay: float = PASSWORD_EMPTY_DELAY
    strength_delay: float = PASSWORD_STRENGTH_DELAY
    match_delay: float = PASSWORDS_MATCH_DELAY
    log_level: str = "WARNING"
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sign-up form with live validation")
    parser.add_argument("--username-delay", type=float, default=USERNAME_DELAY,
                        help="Seconds of quiet before the username is checked")
    parser.add_argument("--password-delay", type=float, default=PASSWORD_EMPTY_DELAY,
                        help="Seconds of quiet before the password is checked for emptiness")
    parser.add_argument("--strength-delay", type=float, default=PASSWORD_STRENGTH_DELAY,
                        help="Seconds of quiet before the password strength is checked")
    parser.add_argument("--match-delay", type=float, default=PASSWORDS_MATCH_DELAY,
                        help="Seconds of quiet before both passwords are compared")
    parser.add_argument("--log-level", type=str.upper, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="Window width")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="Window height")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[Settings, List[str]]:
    """Parse our options out of `argv`.

    Returns the settings and the leftover arguments, which belong to Qt.
    """
    parser = _build_parser()
    args, rest = parser.parse_known_args(argv)
    for name in ("username_delay", "password_delay", "strength_delay", "match_delay"):
        if getattr(args, name) < 0:
            parser.error(f"--{name.replace('_', '-')} must not be negative")
    settings = Settings(
        username_delay=args.username_delay,
        password_delay=args.password_delay,
        strength_delay=args.strength_delay,
        match_delay=args.match_delay,
        log_level=args.log_level,
        width=args.width,
        height=args.height,
    )
    return settings, rest


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
