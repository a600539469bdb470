import sys
from loguru import logger
from pos_stats.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class AppLogger:
    """Loguru setup shared by the pos-stats CLI, the order sources and the engine.

    Replaces loguru's default handler with one stderr sink at the configured
    LOG_LEVEL, leaving stdout to the report and the --json snapshot.
    """
    def __init__(self) -> None:
        logger.remove()
        logger.configure(extra={"name": "pos_stats"})
        logger.add(sink=sys.stderr, level=get_config().log_level.upper(), format=LOG_FORMAT)
        self.logger = logger

    def get_logger(self, name: str = None):
        """Logger tagged with the calling module, or the package-wide one when `name` is empty."""
        if name:
            return self.logger.bind(name=name)
        return self.logger


def get_logger(name: str = None):
    # re-reads the config so set_config_for_test() changes the level
    return AppLogger().get_logger(name)
