# app/services/checkout_service.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.orm import Session

from app.data.database import transaction
from app.data.models.cart import CartModel
from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.domain.errors import ConflictError, NotFoundError
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.services.notification_service import NotificationService
from app.services.order_service import ORDER_STATUS_PREPARING, order_to_dict
from app.services.pricing_service import PricingService
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """
    Zamiana koszyka w zamowienie, wszystko w jednej transakcji:

    1. blokada wiersza koszyka (FOR UPDATE) i sprawdzenie wersji
    2. przeliczenie linii po aktualnych cenach z katalogu (jeden odczyt)
    3. insert zamowienia ze statusem "preparing" i suma z kroku 2
    4. insert linii zamowienia z zamrozonymi cenami z kroku 2
    5. usuniecie linii koszyka
    6. wyzerowanie koszyka (vendor = NULL) z podbiciem wersji
    7. commit

    Blad w dowolnym kroku = rollback calosci. Powiadomienie idzie dopiero po commicie.
    """

    def __init__(
        self,
        db: Session,
        notifier: NotificationService | None = None,
        pricing: PricingService | None = None,
    ):
        self.db = db
        self.cart_repo = CartRepo(db)
        self.order_repo = OrderRepo(db)
        self.pricing = pricing or PricingService(db)
        self.notifier = notifier or NotificationService()

    def checkout(self, cart: CartModel) -> Dict[str, Any]:
        #pusty koszyk odrzucamy zanim cokolwiek zapiszemy
        if cart.quantity <= 0:
            raise ConflictError("Cart is empty")

        cart_id = cart.id
        expected_version = cart.version

        with transaction(self.db, "process checkout"):
            locked = self.cart_repo.get_cart(cart_id, for_update=True)
            if not locked:
                raise NotFoundError("Cart does not exist")

            if locked.version != expected_version:
                raise ConflictError("Cart was modified by another operation")

            pricing = self.pricing.price_lines(cart_id)
            if not pricing.lines:
                raise ConflictError("Cart is empty")

            foreign = [l.item_id for l in pricing.lines if l.vendor_id != locked.vendor_id]
            if foreign:
                raise ConflictError(f"Items {foreign} do not belong to the cart vendor")

            if pricing.total_price != Decimal(locked.total_price):
                logger.warning(
                    "Cart total changed since last recalculation",
                    cart_id=cart_id,
                    cart_total=str(locked.total_price),
                    checkout_total=str(pricing.total_price),
                )

            order = self.order_repo.add_order(
                OrderModel(
                    total_order_cost=pricing.total_price,
                    vendor_id=locked.vendor_id,
                    customer_id=cart_id,
                    status=ORDER_STATUS_PREPARING,
                )
            )

            for line in pricing.lines:
                self.order_repo.add_order_item(
                    OrderItemModel(
                        order_id=order.id,
                        item_id=line.item_id,
                        quantity=line.quantity,
                        price=line.price,
                    )
                )

            self.cart_repo.clear_lines(cart_id)

            rowcount = self.cart_repo.update_cart_version(
                cart_id=cart_id,
                old_version=expected_version,
                new_data={
                    "total_price": Decimal("0.00"),
                    "quantity": 0,
                    "vendor_id": None,
                    "updated_at": datetime.now(timezone.utc),
                    "version": expected_version + 1,
                },
            )
            if rowcount == 0:
                raise ConflictError("Cart was modified by another operation")

            order_id = order.id

        logger.info(
            "Order placed",
            order_id=order_id,
            cart_id=cart_id,
            lines=len(pricing.lines),
            total_order_cost=str(pricing.total_price),
        )

        self._notify(cart_id, order_id)

        return order_to_dict(self.order_repo.get_order(order_id))

    def _notify(self, user_id: int, order_id: int) -> None:
        # zamowienie jest juz zapisane, blad brokera nie moze go cofnac
        try:
            self.notifier.send_order_notification(user_id, order_id)
        except Exception as e:
            logger.warning("Failed to send order notification", order_id=order_id, error=str(e))
