"""Environment and logging helpers."""

import logging
import sys

from ..config import LOG_FORMAT, LOG_DATE_FORMAT


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Set up logging configuration.
    
    Logs are written to the console (stderr) and, optionally, a file.
    
    Args:
        level: Logging level
        log_file: Path to log file (None to disable file logging)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            handlers.append(file_handler)
        except OSError as e:
            # Fall back to console-only if file logging fails
            print(f"Warning: Could not open log file '{log_file}': {e}", file=sys.stderr)
    
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True  # Replace any existing handlers
    )
