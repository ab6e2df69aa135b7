"""Configuration loading for gh_changelog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from xml.etree import ElementTree as ET

from .feeds import FEED_URL
from .renderers import TITLE_WIDTH

logger = logging.getLogger(__name__)

MIN_TITLE_WIDTH = 10


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class AppConfig:
    feed_url: str = FEED_URL
    title_width: int = TITLE_WIDTH
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_path(base_path: Path, target_path: str) -> str:
    """Resolve a path relative to the base config file if it's not absolute."""
    target = Path(target_path)
    if target.is_absolute():
        return str(target)
    return str((base_path.parent / target).resolve())


def parse_app_config(path: str) -> AppConfig:
    """Parse the application configuration XML."""
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info("Loading application configuration from %s", config_path)
    try:
        root = ET.parse(config_path).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"Config file is not valid XML: {exc}") from exc

    feed_url = (root.findtext("feed-url") or "").strip() or FEED_URL

    width_text = root.findtext("title-width", str(TITLE_WIDTH)).strip()
    try:
        title_width = int(width_text)
    except ValueError:
        raise ValueError(
            f"<title-width> must be an integer, got {width_text!r}"
        ) from None
    if title_width < MIN_TITLE_WIDTH:
        raise ValueError(f"<title-width> must be at least {MIN_TITLE_WIDTH}")

    log_node = root.find("logging")
    logging_config = LoggingConfig()
    if log_node is not None:
        logging_config.level = log_node.findtext("level", "WARNING").strip()
        log_file = log_node.findtext("file")
        if log_file:
            logging_config.file = _resolve_path(config_path, log_file.strip())

    return AppConfig(
        feed_url=feed_url,
        title_width=title_width,
        logging=logging_config,
    )
