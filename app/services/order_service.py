# app/services/order_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.domain.errors import ConflictError, NotFoundError, ValidationError
from app.repos.order_repo import OrderRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_STATUS_PREPARING = "preparing"
ORDER_STATUS_READY = "ready"
ORDER_STATUS_DELIVERED = "delivered"
ORDER_STATUS_CANCELLED = "cancelled"

#dozwolone przejscia statusow, delivered i cancelled sa koncowe
ORDER_TRANSITIONS = {
    ORDER_STATUS_PREPARING: {ORDER_STATUS_READY, ORDER_STATUS_CANCELLED},
    ORDER_STATUS_READY: {ORDER_STATUS_DELIVERED, ORDER_STATUS_CANCELLED},
    ORDER_STATUS_DELIVERED: set(),
    ORDER_STATUS_CANCELLED: set(),
}


def order_to_dict(order: OrderModel) -> Dict[str, Any]:
    return {
        "id": order.id,
        "total_order_cost": order.total_order_cost,
        "vendor_id": order.vendor_id,
        "customer_id": order.customer_id,
        "status": order.status,
        "items": [
            {
                "item_id": i.item_id,
                "quantity": i.quantity,
                "price": i.price,
            }
            for i in order.items
        ],
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


class OrderService:
    """
    Zamowienia po checkoucie. Sa niezmienne, poza statusem
    zmienianym przez obsluge restauracji wg ORDER_TRANSITIONS.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    def get_order(self, order_id: int, user_id: int | None = None) -> Dict[str, Any]:
        order = self.repo.get_order(order_id)

        #cudze zamowienie wyglada jak nieistniejace
        if not order or (user_id is not None and order.customer_id != user_id):
            raise NotFoundError("Order not found")

        return order_to_dict(order)

    def list_orders(self, user_id: int) -> List[Dict[str, Any]]:
        return [order_to_dict(o) for o in self.repo.list_orders_for_customer(user_id)]

    def update_status(self, order_id: int, status: str) -> Dict[str, Any]:
        if status not in ORDER_TRANSITIONS:
            raise ValidationError(f"Unknown order status: {status}")

        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Order not found")

        previous = order.status
        if status not in ORDER_TRANSITIONS.get(previous, set()):
            raise ConflictError(f"Cannot change order status from {previous} to {status}")

        updated = self.repo.update_order_status(order_id, status)
        logger.info("Order status changed", order_id=order_id, old_status=previous, new_status=status)
        return order_to_dict(updated)
