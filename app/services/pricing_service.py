# app/services/pricing_service.py
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Tuple

from sqlalchemy.orm import Session

from app.domain.errors import ConflictError, NotFoundError
from app.domain.money import to_money
from app.repos.cart_repo import CartRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PricedLine:
    item_id: int
    vendor_id: int
    quantity: int
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class CartPricing:
    lines: Tuple[PricedLine, ...]
    total_price: Decimal
    quantity: int


class PricingService:
    """Utrzymuje total_price i quantity koszyka zgodne z jego liniami i cenami z katalogu."""

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    def price_lines(self, cart_id: int) -> CartPricing:
        #jeden spojny odczyt (join), nie osobne zapytanie per linia
        rows = self.repo.get_priced_lines(cart_id)

        lines = tuple(
            PricedLine(
                item_id=r.item_id,
                vendor_id=r.vendor_id,
                quantity=r.quantity,
                price=to_money(r.price),
            )
            for r in rows
        )
        total = to_money(sum((l.line_total for l in lines), Decimal("0.00")))
        quantity = sum(l.quantity for l in lines)

        return CartPricing(lines=lines, total_price=total, quantity=quantity)

    def recalculate(self, cart_id: int) -> CartPricing:
        """
        Przelicza koszyk i zapisuje sume w wierszu carts (z podbiciem wersji).
        Nie commituje, dziala w transakcji operacji ktora zmienila linie.
        """
        cart = self.repo.get_cart(cart_id)
        if not cart:
            raise NotFoundError("Cart not found")

        pricing = self.price_lines(cart_id)

        rowcount = self.repo.update_cart_version(
            cart_id=cart_id,
            old_version=cart.version,
            new_data={
                "total_price": pricing.total_price,
                "quantity": pricing.quantity,
                "updated_at": datetime.now(timezone.utc),
                "version": cart.version + 1,
            },
        )

        if rowcount == 0:
            raise ConflictError("Cart was modified by another operation")

        logger.info(
            "Cart recalculated",
            cart_id=cart_id,
            total_price=str(pricing.total_price),
            quantity=pricing.quantity,
        )
        return pricing
