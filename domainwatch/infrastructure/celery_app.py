"""Celery application factory."""
from celery import Celery

from domainwatch.config.settings import Config

TASK_MODULES = ["domainwatch.tasks.trigger_tasks"]

CELERY_SETTINGS = {
    "task_serializer": "json",
    "result_serializer": "json",
    "accept_content": ["json"],
    "timezone": "UTC",
    "enable_utc": True,
    # Messages are acknowledged once the handler returned (at-least-once)
    "task_acks_late": True,
    "task_reject_on_worker_lost": True,
    "worker_prefetch_multiplier": 1,
    "task_ignore_result": True,
    "task_time_limit": 300,
    "task_soft_time_limit": 240,
    "task_default_queue": "domainwatch",
    "worker_hijack_root_logger": False,
}


def create_celery_app(app=None) -> Celery:
    """
    Build the Celery application consuming domain messages.

    Args:
        app: Optional Flask app whose config overrides the defaults

    Returns:
        Configured Celery instance
    """
    celery = Celery(
        "domainwatch",
        broker=Config.CELERY_BROKER_URL,
        backend=Config.CELERY_RESULT_BACKEND,
        include=TASK_MODULES,
    )
    celery.conf.update(CELERY_SETTINGS)

    if app is not None:
        celery.conf.update(app.config)

    return celery


celery_app = create_celery_app()
