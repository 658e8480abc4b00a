import argparse
import asyncio
import logging
import sys
from typing import Optional

from fileman.config.settings import Settings
from fileman.container import DependencyContainer
from fileman.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fileman",
        description="Interactive file manager with a virtual working directory.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--username",
        default=None,
        help="Name shown in the greeting and farewell (default: FILEMAN_USERNAME)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: FILEMAN_LOG_LEVEL or WARNING)",
    )
    # Unrecognized --key=value flags are tolerated and ignored
    args, _ = parser.parse_known_args(argv)
    return args


def configure_logging(level: str, log_file: str = "") -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        filename=log_file or None,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = Settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(args.log_level or settings.log_level, settings.log_file)
    container = DependencyContainer(settings=settings, username=args.username)
    session_loop = container.get_session_loop()
    return asyncio.run(session_loop.run())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
