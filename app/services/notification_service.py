# app/services/notification_service.py
from kombu.exceptions import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from app.celery_worker import celery_app
from app.utils.logging import get_logger

logger = get_logger(__name__)


#tenacity retry na publikacje do brokera (celery ma task_publish_retry wylaczone)
def broker_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(OperationalError),
    )


class NotificationService:
    """
    Serwis do wysyłania powiadomień.
    Używa Celery do asynchronicznego przetwarzania.
    """

    @broker_retry()
    def send_order_notification(self, user_id: int, order_id: int):
        """
        Wysyła powiadomienie o przyjęciu zamówienia do przygotowania.
        """
        send_order_notification_task.delay(user_id, order_id)


@celery_app.task(name="app.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: int, order_id: int):
    """
    Celery task - w prawdziwym systemie wysłałby email/SMS/push.
    Teraz tylko loguje.
    """
    logger.info("Order notification sent", user_id=user_id, order_id=order_id, message="Order is being prepared")

    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
