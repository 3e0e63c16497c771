"""Gunicorn configuration for the connector API.

Run with: gunicorn -c gunicorn_config.py "domainwatch:create_app()"
"""
import multiprocessing
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"
backlog = 2048

# Trigger processing runs in Celery; web workers only serve connector calls
workers = int(os.getenv("GUNICORN_WORKERS", min(max(multiprocessing.cpu_count(), 2), 8)))
worker_class = "sync"
# Order sagas are sequential outbound calls to registrar APIs
timeout = 180
graceful_timeout = 30
keepalive = 5

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
capture_output = True

proc_name = "domainwatch"
