
import logging
from typing import Union
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "gql_api_tester"

def setup_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Process diagnostics go to stderr so stdout stays clean for reports and --yaml output."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger

def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
