"""Application services."""
from domainwatch.application.services.trigger_evaluator import TriggerEvaluator, TriggerMatch, evaluate
from domainwatch.application.services.notification_dispatcher import NotificationDispatcher
from domainwatch.application.services.tld_catalog import TldCatalog

__all__ = [
    "TriggerEvaluator",
    "TriggerMatch",
    "evaluate",
    "NotificationDispatcher",
    "TldCatalog",
]
