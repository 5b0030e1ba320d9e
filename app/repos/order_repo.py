# app/repos/order_repo.py
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        #bez commita, zamowienie powstaje w transakcji checkoutu
        self.db.add(order)
        self.db.flush()
        return order

    def add_order_item(self, order_item: OrderItemModel) -> OrderItemModel:
        self.db.add(order_item)
        self.db.flush()
        return order_item

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        ).scalar_one_or_none()

    def list_orders_for_customer(self, customer_id: int) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .where(OrderModel.customer_id == customer_id)
                .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            ).scalars().all()
        )

    def update_order_status(self, order_id: int, status: str) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.status = status
            order.updated_at = datetime.now(timezone.utc)
            self.db.commit()
            self.db.refresh(order)
        return order
