import logging
from pathlib import Path
from typing import Optional

from portfolio_terminal.runtime_config import get_data_dir

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> Path:
    """Send package logs to a file; the terminal itself belongs to the UI.

    Returns the path of the log file in use.
    """
    if log_file is None:
        log_dir = get_data_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "portfolio_terminal.log"

    logger = logging.getLogger("portfolio_terminal")
    logger.setLevel(level)
    # Calling setup twice (tests, repeated CLI invocations) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    logger.propagate = False
    return log_file
