import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "INFO"


class Logger:
    """Utility class for standardized logging configuration."""

    @staticmethod
    def configure(level: str = DEFAULT_LOG_LEVEL) -> None:
        """
        Set the process-wide log level, e.g. from the --log-level flag.

        Args:
            level: One of LOG_LEVELS, case-insensitive.

        Raises:
            ValueError: If the level name is not one of LOG_LEVELS.
        """
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{level}', expected one of {LOG_LEVELS}")

        root = logging.getLogger()
        if not root.hasHandlers():
            logging.basicConfig(level=level, format=LOG_FORMAT)
        root.setLevel(level)

    @staticmethod
    def get(name: str) -> logging.Logger:
        """Get a matchmaker logger, installing the default handler on first use."""
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=LOG_FORMAT)
        return logging.getLogger(name)
