"""
Initializes the Dynaconf settings object for the discord_bots_org package.
This module is the single source of truth for all configuration.

Defaults ship in `config/settings.toml`; any key can be overridden with a
`DBL_` environment variable, e.g. `DBL_HTTP__TIMEOUT=5`.
"""

import logging
from pathlib import Path
from typing import Optional

from dynaconf import Dynaconf

PACKAGE_ROOT = Path(__file__).parent

settings = Dynaconf(
    root_path=PACKAGE_ROOT,
    settings_files=["config/settings.toml"],
    envvar_prefix="DBL",
)


def configure_logging(level: Optional[str] = None):
    """Applies basic logging configuration; the library never calls this."""
    logging.basicConfig(level=level or settings.logging.level)
