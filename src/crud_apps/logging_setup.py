import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure diagnostics for the console applications.
    - Level comes from the argument, then LOG_LEVEL env, then APP_LOG_LEVEL settings.
    - Log records go to stderr so they never mix with the applications' stdout output.
    """
    if level is None and not os.getenv("LOG_LEVEL"):
        from crud_apps.settings import get_settings
        level = get_settings().log_level

    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    # Fallback to INFO if user passes something weird
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level_value,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("crud_apps").setLevel(level_value)
