"""Celery tasks consuming queued domain messages."""
import logging
from typing import Any, Dict
from celery import Task
from domainwatch.application.use_cases.process_domain_trigger_use_case import ProcessDomainTrigger
from domainwatch.domain.exceptions import DeliveryError, TransportError
from domainwatch.infrastructure.celery_app import celery_app
from domainwatch.infrastructure.service_container import ServiceContainer
from domainwatch.middleware.monitoring import track_trigger_message


logger = logging.getLogger(__name__)


class CallbackTask(Task):
    """Custom task class with error logging."""

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """Handle task failure."""
        logger.error(f"Task {task_id} failed: {exc}", exc_info=einfo)


@celery_app.task(
    bind=True,
    base=CallbackTask,
    max_retries=3,
    default_retry_delay=60,
    name="domainwatch.handle_message"
)
def handle_message_task(self, kind: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Dispatch a queued message to the handler registered for its kind.

    Delivery and transport failures are retried with a growing delay;
    any other failure is final.

    Args:
        self: Task instance (bound task)
        kind: Message kind
        payload: JSON payload of the message

    Returns:
        Processing result dictionary
    """
    registry = ServiceContainer().get_message_handler_registry()
    try:
        result = registry.handle(kind, payload)
    except (DeliveryError, TransportError) as exc:
        logger.warning(f"Message {kind} failed, retrying: {exc}")
        track_trigger_message(False)
        raise self.retry(exc=exc, countdown=60 * (self.request.retries + 1))
    except Exception:
        track_trigger_message(False)
        raise

    track_trigger_message(True)
    return {"status": "success", "kind": kind, "result": result}


def enqueue_domain_trigger(message: ProcessDomainTrigger):
    """
    Publish a ProcessDomainTrigger message.

    Returns:
        The Celery AsyncResult
    """
    result = handle_message_task.delay(ProcessDomainTrigger.KIND, message.to_dict())
    logger.info(f"Queued {ProcessDomainTrigger.KIND} for {message.ldh_name}: task_id={result.id}")
    return result
