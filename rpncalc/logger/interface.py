"""Logger interface.

Implementations accept a message plus arbitrary keyword context, which is
rendered as structured fields by the concrete logger.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logger used throughout rpncalc."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def get_session_id(self) -> str:
        """Return the identifier shared by all records of this process."""
        pass
