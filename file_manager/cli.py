import argparse
import asyncio
import logging
import sys

from file_manager.config.settings import Settings
from file_manager.container import container
from file_manager.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive file manager: navigate directories and work with files.",
    )
    parser.add_argument(
        "--username",
        default=None,
        help="Name used in the greeting and farewell (default: User)",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Initial working directory (default: your home directory)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        filename=settings.log_file,
    )


def main(argv: list[str] | None = None) -> int:
    # Unknown flags are ignored rather than rejected.
    args, unknown = build_parser().parse_known_args(argv)

    try:
        settings = Settings(
            username=args.username,
            start_dir=args.start_dir,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings)
    logger = logging.getLogger(__name__)
    if unknown:
        logger.debug(f"Ignoring unknown arguments: {unknown}")

    container.configure(settings)
    session = container.create_session()
    try:
        return asyncio.run(session.run())
    except KeyboardInterrupt:
        # interrupted before the loop could take over SIGINT
        session.interrupt()
        session.farewell()
        return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
