"""
Centralized logging configuration using loguru.
Logs go to stderr because stdout carries the MCP stdio transport.
"""
import sys
from loguru import logger
from core.app_config import ServerConfig

def setup_logger(level: str = ServerConfig.LOG_LEVEL):
    """
    Configure loguru for async console logging.
    Removes default handler and adds a new one with custom format.
    """
    # Remove the default handler
    logger.remove()

    # Add console handler with custom format
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False
    )

    return logger

# Initialize logger on module import
logger = setup_logger()
