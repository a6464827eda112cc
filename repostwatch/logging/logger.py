import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the analysis service.

    Keyword arguments are rendered after the message as ``key=value`` pairs so
    item ids and URLs stay greppable in plain stdout logs.
    """

    _logger: logging.Logger = logging.getLogger("repostwatch")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @staticmethod
    def _render(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} {pairs}"

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(cls._render(message, kwargs))

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(cls._render(message, kwargs))

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(cls._render(message, kwargs))

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(cls._render(message, kwargs))
