"""Command-line interface for the gh_changelog application."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pprint
import sys
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, parse_app_config
from .errors import ChangelogError
from .runner import RunConfig, execute

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="gh changelog",
        description="Show recent entries from the GitHub changelog.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Show full content with formatted body.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI styling in the compact listing.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional path to a configuration XML file.",
    )

    # Overrides for logging/debugging
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING). Overrides config.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional path to a log file. Overrides config.",
    )

    subparsers = parser.add_subparsers(dest="command")
    open_parser = subparsers.add_parser(
        "open", help="Open an entry's link in the default browser."
    )
    open_parser.add_argument(
        "id",
        metavar="ID",
        help="Entry ID as shown in the listing, e.g. '#0' or '0'.",
    )

    return parser


def configure_logging(level_name: str, log_file: Optional[str] = None) -> None:
    """Initialise logging according to options."""
    log_level = getattr(logging, level_name.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unsupported log level: {level_name}")

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        log_path = Path(log_file)
        if log_path.parent and not log_path.parent.exists():
            log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.debug(
            "Logger initialised with level %s and file output to %s",
            level_name.upper(),
            log_path,
        )
    else:
        logger.debug(
            "Logger initialised with console output at level %s", level_name.upper()
        )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config = parse_app_config(args.config) if args.config else AppConfig()

        # CLI overrides config
        log_level = args.log_level or app_config.logging.level
        log_file = args.log_file or app_config.logging.file
        configure_logging(log_level, log_file)

        config = RunConfig(
            feed_url=app_config.feed_url,
            pretty=args.pretty,
            open_id=args.id if args.command == "open" else None,
            title_width=app_config.title_width,
            color=not args.no_color and sys.stdout.isatty(),
        )
        logger.debug(
            "Active Configuration:\n%s", pprint.pformat(dataclasses.asdict(config))
        )

        result = execute(config)
    except ValueError as exc:
        parser.error(str(exc))
    except (ChangelogError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error during execution.")
        return 1

    sys.stdout.write(result.output_text)
    return 0
