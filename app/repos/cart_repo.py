# app/repos/cart_repo.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.item import ItemModel


class CartRepo:
    """
    Dostep do tabel carts i cart_items.
    Repo nie commituje, granice transakcji ustala serwis przez database.transaction().
    """

    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, cart_id: int, for_update: bool = False) -> CartModel | None:
        stmt = select(CartModel).where(CartModel.id == cart_id)
        if for_update:
            #SELECT ... FOR UPDATE + odswiezenie obiektu z identity map
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def get_cart_items(self, cart_id: int) -> List[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.cart_id == cart_id)
                .order_by(CartItemModel.id)
            ).scalars().all()
        )

    def get_cart_item(self, cart_id: int, item_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.item_id == item_id,
            )
        ).scalar_one_or_none()

    def get_priced_lines(self, cart_id: int):
        """Jeden odczyt: linie koszyka + aktualne ceny i vendor z katalogu."""
        return self.db.execute(
            select(
                CartItemModel.item_id,
                CartItemModel.quantity,
                ItemModel.vendor_id,
                ItemModel.price,
            )
            .join(ItemModel, ItemModel.id == CartItemModel.item_id)
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.id)
        ).all()

    def upsert_line(self, cart_id: int, item_id: int, quantity: int) -> CartItemModel | None:
        """
        Nadpisuje ilosc (nie dodaje) albo wstawia nowa linie.
        quantity == 0 usuwa linie, zero nigdy nie jest zapisywane.
        """
        if quantity < 0:
            raise ValueError("quantity must not be negative")

        if quantity == 0:
            self.delete_cart_item(cart_id, item_id)
            return None

        line = self.get_cart_item(cart_id, item_id)
        if line:
            line.quantity = quantity
        else:
            line = CartItemModel(cart_id=cart_id, item_id=item_id, quantity=quantity)
            self.db.add(line)

        self.db.flush()
        return line

    def delete_cart_item(self, cart_id: int, item_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.item_id == item_id,
            )
        )
        return result.rowcount

    def clear_lines(self, cart_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.cart_id == cart_id)
        )
        return result.rowcount

    def delete_cart(self, cart_id: int) -> None:
        self.clear_lines(cart_id)
        self.db.execute(delete(CartModel).where(CartModel.id == cart_id))

    def reset_totals(self, cart_id: int, vendor_id: int | None = None) -> None:
        self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id)
            .values(
                total_price=Decimal("0.00"),
                quantity=0,
                vendor_id=vendor_id,
                updated_at=datetime.now(timezone.utc),
            )
        )

    def update_cart_version(self, cart_id: int, old_version: int, new_data: Dict[str, Any]) -> int:
        # Optimistic locking
        # update carts set ..., version = old+1 where id = ? and version = old
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(**new_data)
        )
        return result.rowcount
