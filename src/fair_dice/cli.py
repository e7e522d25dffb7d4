# Area: Shared
"""
fair_dice.cli — Command-line interface
======================================

Provides the CLI entry point for playing a game.

Usage:
    python -m fair_dice 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3
    python -m fair_dice --demo 1,2,3,4,5,6 1,2,3,4,5,6 1,2,3,4,5,6
    python -m fair_dice --config config.json 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7

Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Config key: demo: true
    3. Environment variable: DEMO_MODE=true
"""

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from .config import build_config, load_config
from .demo_peer import DemoPeer
from .errors import ValidationError, VerificationFailure
from .interaction import ConsoleInteraction, PeerInteraction
from .parser import USAGE_EXAMPLE, parse_dice_args
from ._game.enums import TiePolicy
from ._game.session import GameSession
from ._shared.logging_config import (
    enable_protocol_mode,
    log_and_terminate,
    setup_logging,
)
from ._shared.protocol_logger import get_protocol_logger

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fair-dice",
        description="Non-transitive dice game with provably fair commit-reveal rolls",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  {USAGE_EXAMPLE}
  fair-dice --demo 1,2,3,4,5,6 1,2,3,4,5,6 1,2,3,4,5,6
  fair-dice --tie-policy draw 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7
  DEMO_MODE=true fair-dice 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7
        """,
    )

    parser.add_argument(
        "dice",
        nargs="*",
        help="One die per argument, faces separated by commas (at least 3 dice)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        default=None,
        help="Let an automatic peer answer every question",
    )

    parser.add_argument(
        "--tie-policy",
        choices=[p.value for p in TiePolicy],
        help="How equal rolls are resolved (default: system_wins)",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        default=None,
        help="Print each commit-reveal protocol step",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        dest="strict_verification",
        help="Terminate if any revealed secret fails verification",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON logs to this file",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final game record as JSON",
    )

    return parser.parse_args(argv)


def get_interaction(demo: bool) -> PeerInteraction:
    """Get the peer channel for the selected mode."""
    if demo:
        return DemoPeer()
    return ConsoleInteraction()


def report_error(error: ValidationError) -> None:
    print(f"Error: {error.message}", file=sys.stderr)
    if error.hint:
        print(error.hint, file=sys.stderr)
    print(f"Usage: {USAGE_EXAMPLE}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = build_config(
            load_config(args.config),
            overrides={
                "demo": args.demo,
                "tie_policy": args.tie_policy,
                "trace": args.trace,
                "strict_verification": args.strict_verification,
                "log_file": args.log_file,
            },
        )
    except PydanticValidationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return EXIT_INVALID
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID

    setup_logging(log_file_path=config.log_file, level=config.level)

    try:
        dice_set = parse_dice_args(args.dice)
    except ValidationError as e:
        report_error(e)
        return EXIT_INVALID

    protocol_logger = None
    if config.trace:
        enable_protocol_mode()
        protocol_logger = get_protocol_logger()

    session = GameSession(
        dice_set,
        get_interaction(config.demo),
        tie_policy=config.tie_policy,
        protocol_logger=protocol_logger,
    )

    try:
        result = session.play()
    except (KeyboardInterrupt, EOFError):
        # Any unrevealed commitment is abandoned with the session
        print("\nGame cancelled.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if config.strict_verification:
        for record in result.rounds:
            if not record.verified:
                log_and_terminate(VerificationFailure(
                    label=record.label,
                    digest=record.digest,
                    key_hex=record.key_hex,
                    number=record.number,
                ))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))

    return EXIT_OK
