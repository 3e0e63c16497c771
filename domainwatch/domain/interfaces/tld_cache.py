"""Interface for the TLD list cache."""
from abc import ABC, abstractmethod
from typing import List, Optional


class ITldCache(ABC):
    """Key/value store for provider TLD lists."""

    @abstractmethod
    def get(self, key: str) -> Optional[List[str]]:
        """
        Retrieve a cached TLD list.

        Returns:
            The list, or None on a cache miss
        """
        pass

    @abstractmethod
    def set(self, key: str, tlds: List[str]) -> None:
        pass
