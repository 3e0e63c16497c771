"""Lookup interfaces for entities stored outside this service (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from domainwatch.domain.entities.domain import Domain
from domainwatch.domain.entities.watch_list import WatchList


class IDomainRepository(ABC):

    @abstractmethod
    def find_by_ldh_name(self, ldh_name: str) -> Optional[Domain]:
        pass


class IWatchListRepository(ABC):

    @abstractmethod
    def find_by_token(self, token: str) -> Optional[WatchList]:
        pass
