"""Application use cases."""
from domainwatch.application.use_cases.process_domain_trigger_use_case import (
    ProcessDomainTrigger,
    TriggerMessageHandler,
)

__all__ = ["ProcessDomainTrigger", "TriggerMessageHandler"]
