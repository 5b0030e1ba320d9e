# app/celery_worker.py
from celery import Celery
from celery.signals import setup_logging

from app.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND
from app.utils.logging import configure_logging

celery_app = Celery(
    "restaurant",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# WAŻNE: Explicite importuj taski, żeby Celery je zarejestrował
celery_app.conf.imports = (
    "app.services.notification_service",
)

#retry publikacji robi tenacity w NotificationService
celery_app.conf.task_publish_retry = False
celery_app.conf.timezone = "UTC"


@setup_logging.connect
def _setup_logging(**kwargs):
    configure_logging()
