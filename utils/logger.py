import logging
from pathlib import Path
from typing import Optional
from rich.logging import RichHandler
from rich.console import Console

console = Console(stderr=True)


def setup_logging(log_level: str = "INFO", log_file: Optional[Path] = None):
    """
    Configure installer logging with rich formatting.

    The package manager owns stdout, so console output goes to stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file receiving a plain-text copy of the log
    """
    handlers = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False
        )
    ]

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers
    )

    logger = logging.getLogger("flow_installer")
    logger.setLevel(log_level)

    return logger


def get_logger(name: str = "flow_installer"):
    """Get a logger instance"""
    return logging.getLogger(name)
