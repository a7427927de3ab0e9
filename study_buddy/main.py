"""
Study Buddy - Console Entry Point

Runs the rule-based English tutor as an interactive console chat:
- Prints a greeting
- Reads one line at a time and prints the tutor's reply
- Stops on 'exit', end of input, or Ctrl-C

Usage:
    study-buddy
    python -m study_buddy.main --log-level DEBUG
"""

import argparse
import sys
from typing import Callable, List, Optional

from loguru import logger

from study_buddy import __app_name__, __version__
from study_buddy.config import Settings, settings
from study_buddy.content.lessons import GOODBYE
from study_buddy.services.dialogue_service import (
    Route,
    TutorDialogueEngine,
    get_dialogue_engine,
)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]


def configure_logging(config: Settings = settings, level: Optional[str] = None) -> None:
    """Configure loguru logging based on settings."""
    # Remove default handler
    logger.remove()

    log_level = (level or config.effective_log_level).upper()
    log_format = config.log_format

    logger.add(
        sys.stderr,
        format=log_format,
        level=log_level,
        colorize=True,
    )

    # Add file handler when requested or for production
    log_file = config.log_file
    if log_file is None and config.is_production:
        log_file = "logs/study-buddy-{time:YYYY-MM-DD}.log"

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            level="INFO",
            format=log_format,
        )


def run_console(
    engine: Optional[TutorDialogueEngine] = None,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    config: Settings = settings,
) -> int:
    """
    Run the interactive tutor loop.

    Args:
        engine: Dialogue engine to use (defaults to the global engine)
        input_fn: Reads one line, given the prompt
        print_fn: Prints one line
        config: Settings for the prompt and reply label

    Returns:
        Process exit code
    """
    engine = engine or get_dialogue_engine()
    session = engine.new_session()

    print_fn(engine.greeting())

    try:
        while True:
            try:
                user_input = input_fn(f"\n{config.user_prompt}")
            except (EOFError, KeyboardInterrupt):
                print_fn(GOODBYE)
                break

            is_exit = engine.route(user_input, session) == Route.EXIT
            response = engine.reply(user_input, session)
            print_fn(f"{config.tutor_label}: {response}")

            if is_exit:
                break
    except Exception:
        logger.exception(f"Tutor session {session.session_id} failed")
        raise
    finally:
        logger.info(
            f"Session {session.session_id} ended after {session.turn_count} turns"
        )

    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Rule-based English study buddy for the console",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG, INFO)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entrypoint."""
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger.info(f"Study Buddy {__version__} starting ({settings.environment})")
    return run_console()


if __name__ == "__main__":
    sys.exit(main())
