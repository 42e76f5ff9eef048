"""
Configuration Management

Loads configuration from .env files and provides typed config objects.
Also sets up logging for the command-line entry point.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .models import Config


def load_config(env_file: Optional[Path] = None) -> Config:
    """
    Load configuration from .env file and environment variables.

    Searches for .env file in:
    1. Provided env_file path
    2. Current directory
    3. User's home directory

    Environment variables override .env file values.

    Args:
        env_file: Optional path to .env file

    Returns:
        Config object with all settings

    Example:
        config = load_config()
        report = audit_file(config.colors_file)
    """
    # Load .env file
    if env_file and env_file.exists():
        load_dotenv(env_file)
    elif Path(".env").exists():
        load_dotenv(".env")
    elif (Path.home() / ".env").exists():
        load_dotenv(Path.home() / ".env")

    # Build config from environment
    config = Config(
        colors_file=os.getenv("CONTRAST_COLORS_FILE", "colors.json"),
        export_path=os.getenv("CONTRAST_EXPORT_PATH", "contrast_results.csv"),
        log_level=os.getenv("CONTRAST_LOG_LEVEL", "WARNING")
    )

    return config


def configure_logging(level: str = "WARNING") -> None:
    """Route log records to stderr through rich"""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler]
    )
