"""Application configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

RECORDS_FILE = "patient_records.txt"
REPORT_FILE = "patient_report.txt"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class AppConfig:
    """Configuration for a Wardbook session."""

    # File locations (fixed by convention, relative to the working directory)
    records_path: Path = Path(RECORDS_FILE)
    report_path: Path = Path(REPORT_FILE)

    # Diagnostics
    debug: bool = False

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration, honouring ``WARDBOOK_DEBUG`` for log verbosity."""
        load_dotenv()
        return cls(
            debug=os.getenv("WARDBOOK_DEBUG", "").lower() in ("true", "1", "yes"),
        )


def configure_logging(config: AppConfig) -> None:
    """Send diagnostics to stderr so they stay out of the menu output."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format=LOG_FORMAT,
    )

