"""
Logger interface for diagnostic and outcome output.

Operations report through ILogger: a warning when a supervised process
times out, a verbose confirmation when an operation completes. Nothing
reads the logger back for control decisions.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Interface for leveled logging."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        pass

    @abstractmethod
    def verbose(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a verbose-level message (between debug and info)."""
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        pass
