"""
Logging configuration for the league model fetcher.

Everything logs under the "model_fetcher" logger: model_client reports
downloads (INFO), cache hits (DEBUG) and fetch or decode failures (ERROR)
before re-raising them; prefetch reports per-league results. Only the
prefetch entry point calls setup_logging; library callers keep their own
handlers.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Setup application logging."""

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger = logging.getLogger("model_fetcher")
    logger.setLevel(getattr(logging, level.upper()))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance."""
    if name:
        return logging.getLogger(f"model_fetcher.{name}")
    return logging.getLogger("model_fetcher")
