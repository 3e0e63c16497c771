"""Matching of new domain events against watch list triggers."""
from datetime import datetime
from typing import List, NamedTuple

from domainwatch.domain.entities.domain import Domain, DomainEvent
from domainwatch.domain.entities.watch_list import WatchList, WatchListTrigger


class TriggerMatch(NamedTuple):
    event: DomainEvent
    trigger: WatchListTrigger


def evaluate(domain: Domain, watch_list: WatchList, cutoff: datetime) -> List[TriggerMatch]:
    """
    Return every (event, trigger) pair that fired since ``cutoff``.

    Events dated exactly at ``cutoff`` were already processed and are
    skipped. Triggers match on exact event kind. Output is grouped by
    event, in event date order.
    """
    matches = []
    for event in domain.events_after(cutoff):
        for trigger in watch_list.triggers:
            if trigger.event == event.action:
                matches.append(TriggerMatch(event, trigger))
    return matches


class TriggerEvaluator:
    """Callable wrapper so the evaluator can be injected like other services."""

    def __call__(self, domain: Domain, watch_list: WatchList, cutoff: datetime) -> List[TriggerMatch]:
        return evaluate(domain, watch_list, cutoff)
