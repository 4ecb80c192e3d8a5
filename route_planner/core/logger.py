# route_planner/core/logger.py
import sys

from loguru import logger

from route_planner.core.config import settings

# Single stdout sink shared by the whole application
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level: <8}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    level=settings.LOG_LEVEL,
    backtrace=True,
)

__all__ = ["logger"]
