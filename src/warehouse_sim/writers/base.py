"""Base classes for result writers."""

from abc import ABC, abstractmethod
from typing import Any


class BaseWriter(ABC):
    """Abstract base class for all simulation result writers."""

    @abstractmethod
    def write(self, data: Any, destination: str) -> None:
        """Write data to the specified destination."""
        pass
