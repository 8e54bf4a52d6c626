"""Logging configuration for the application"""
import logging
import sys
from pathlib import Path
from typing import Optional
from kroki_mcp.core.config import settings

# Use absolute path relative to project root
_project_root = Path(__file__).parent.parent.parent
logs_dir = _project_root / "logs"


def setup_logging(
    name: str = "kroki_mcp",
    log_level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration

    Console output goes to stderr: stdout is reserved for the MCP stdio
    transport.

    Args:
        name: Logger name (usually __name__)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name, created under the logs directory

    Returns:
        Configured logger instance
    """
    # Determine log level
    if log_level is None:
        log_level = settings.LOG_LEVEL or ("DEBUG" if settings.DEBUG else "INFO")

    level = getattr(logging, log_level.upper(), logging.INFO)

    # Create logger
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Create formatters
    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    # File handler (if log_file is provided)
    log_file = log_file or settings.LOG_FILE
    if log_file:
        logs_dir.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(logs_dir / log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with default configuration

    Args:
        name: Logger name (usually __name__). If None, uses caller's module name.

    Returns:
        Logger instance
    """
    # If name is not provided, try to get caller's module name
    if name is None:
        import inspect
        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get('__name__', 'kroki_mcp')
        else:
            name = 'kroki_mcp'

    logger = logging.getLogger(name)

    # If logger doesn't have handlers, set it up
    if not logger.handlers:
        return setup_logging(name)

    return logger
