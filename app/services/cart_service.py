# app/services/cart_service.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.orm import Session

from app.data.database import transaction
from app.data.models.cart import CartModel
from app.domain.errors import NotFoundError, ValidationError
from app.repos.cart_repo import CartRepo
from app.repos.user_repo import UserRepo
from app.services.catalog_service import CatalogService
from app.services.pricing_service import PricingService
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka, jeden koszyk na klienta.
    commands (add/update, remove, empty) modyfikuja stan i zawsze koncza sie przeliczeniem
    query (get) tylko odczyt

    Koszyk trzyma produkty tylko jednego vendora, dodanie produktu innego vendora
    czysci koszyk (bez pytania, bez mergowania).
    """

    def __init__(
        self,
        db: Session,
        catalog: CatalogService | None = None,
        pricing: PricingService | None = None,
    ):
        self.db = db
        self.repo = CartRepo(db)
        self.user_repo = UserRepo(db)
        self.catalog = catalog or CatalogService(db)
        self.pricing = pricing or PricingService(db)

    #query - odczyt
    def load_cart(self, customer_id: int) -> CartModel:
        cart = self.repo.get_cart(customer_id)
        if not cart:
            raise NotFoundError("Cart not found")
        return cart

    def get_cart(self, customer_id: int) -> Dict[str, Any]:
        cart = self.load_cart(customer_id)

        #ceny jednostkowe z katalogu, sumy z wiersza koszyka
        pricing = self.pricing.price_lines(cart.id)

        return {
            "id": cart.id,
            "vendor_id": cart.vendor_id,
            "total_price": cart.total_price,
            "quantity": cart.quantity,
            "items": [
                {
                    "item_id": line.item_id,
                    "quantity": line.quantity,
                    "price": line.price,
                }
                for line in pricing.lines
            ],
            "created_at": cart.created_at,
            "updated_at": cart.updated_at,
        }

    #cart store
    def get_or_create_cart(self, customer_id: int) -> CartModel:
        """Bez commita, wolane wewnatrz transakcji add_or_update_line."""
        existing = self.repo.get_cart(customer_id)
        if existing:
            return existing

        if not self.user_repo.get_user(customer_id):
            raise NotFoundError("User not found")

        now = datetime.now(timezone.utc)
        cart = self.repo.create_cart(
            CartModel(
                id=customer_id,
                total_price=Decimal("0.00"),
                quantity=0,
                vendor_id=None,
                version=1,
                created_at=now,
                updated_at=now,
            )
        )
        logger.info("Cart created", cart_id=customer_id)
        return cart

    def bind_vendor_if_needed(self, cart: CartModel, vendor_id: int) -> CartModel:
        if cart.vendor_id == vendor_id:
            return cart

        if cart.vendor_id is not None:
            logger.info(
                "Cart vendor switched, clearing lines",
                cart_id=cart.id,
                old_vendor_id=cart.vendor_id,
                new_vendor_id=vendor_id,
            )
            self.repo.clear_lines(cart.id)

        self.repo.reset_totals(cart.id, vendor_id=vendor_id)
        return cart

    #commands
    def add_or_update_line(self, customer_id: int, item_id: int, quantity: int) -> Dict[str, Any]:
        # Walidacje przed jakimkolwiek zapisem
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Quantity must be a positive integer")

        item = self.catalog.get_item(item_id)

        with transaction(self.db, "update cart"):
            cart = self.get_or_create_cart(customer_id)
            self.bind_vendor_if_needed(cart, item.vendor_id)
            self.repo.upsert_line(cart.id, item.id, quantity)
            self.pricing.recalculate(cart.id)

        logger.info("Cart line set", cart_id=customer_id, item_id=item_id, quantity=quantity)
        return self.get_cart(customer_id)

    def remove_line(self, customer_id: int, item_id: int) -> Dict[str, Any]:
        cart = self.load_cart(customer_id)

        with transaction(self.db, "update cart"):
            if self.repo.delete_cart_item(cart.id, item_id) == 0:
                raise NotFoundError("Item is not in the cart")
            self.pricing.recalculate(cart.id)

        logger.info("Cart line removed", cart_id=customer_id, item_id=item_id)
        return self.get_cart(customer_id)

    def recalculate(self, customer_id: int) -> Dict[str, Any]:
        cart = self.load_cart(customer_id)

        with transaction(self.db, "recalculate cart"):
            self.pricing.recalculate(cart.id)

        return self.get_cart(customer_id)

    def empty_cart(self, customer_id: int) -> Dict[str, Any]:
        cart = self.load_cart(customer_id)

        with transaction(self.db, "empty cart"):
            self.repo.clear_lines(cart.id)
            self.repo.reset_totals(cart.id, vendor_id=None)
            # podbicie wersji przez recalculate (pusty koszyk -> 0/0)
            self.pricing.recalculate(cart.id)

        logger.info("Cart emptied", cart_id=customer_id)
        return self.get_cart(customer_id)
