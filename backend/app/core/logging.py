import logging
import sys

from app.core.config import settings


def setup_logging() -> None:
    """Configure logging to output to stdout with proper formatting."""
    root_logger = logging.getLogger()
    # uvicorn --reload and the test client both import the app more than once
    if any(getattr(h, "_study_tracker", False) for h in root_logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    handler._study_tracker = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

    # Set lower log levels for some noisy libraries
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
