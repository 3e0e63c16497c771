"""In-memory lookups, used when no external store is wired in."""
from typing import Dict, Iterable, Optional

from domainwatch.domain.entities.domain import Domain
from domainwatch.domain.entities.watch_list import WatchList
from domainwatch.domain.interfaces.repositories import IDomainRepository, IWatchListRepository


class InMemoryDomainRepository(IDomainRepository):

    def __init__(self, domains: Iterable[Domain] = ()):
        self._domains: Dict[str, Domain] = {domain.ldh_name: domain for domain in domains}

    def add(self, domain: Domain) -> None:
        self._domains[domain.ldh_name] = domain

    def find_by_ldh_name(self, ldh_name: str) -> Optional[Domain]:
        return self._domains.get(ldh_name)


class InMemoryWatchListRepository(IWatchListRepository):

    def __init__(self, watch_lists: Iterable[WatchList] = ()):
        self._watch_lists: Dict[str, WatchList] = {wl.token: wl for wl in watch_lists}

    def add(self, watch_list: WatchList) -> None:
        self._watch_lists[watch_list.token] = watch_list

    def find_by_token(self, token: str) -> Optional[WatchList]:
        return self._watch_lists.get(token)
