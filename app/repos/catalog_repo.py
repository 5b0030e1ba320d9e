# app/repos/catalog_repo.py
from typing import List

from sqlalchemy import exists, or_, select
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.item import ItemModel
from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.data.models.table import TableModel
from app.data.models.vendor import VendorModel


class CatalogRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_item(self, item_id: int) -> ItemModel | None:
        return self.db.get(ItemModel, item_id)

    def get_vendor(self, vendor_id: int) -> VendorModel | None:
        return self.db.get(VendorModel, vendor_id)

    def list_vendor_items(self, vendor_id: int) -> List[ItemModel]:
        return list(
            self.db.execute(
                select(ItemModel)
                .where(ItemModel.vendor_id == vendor_id)
                .order_by(ItemModel.id)
            ).scalars().all()
        )

    def create_vendor(self, vendor: VendorModel) -> VendorModel:
        self.db.add(vendor)
        self.db.commit()
        self.db.refresh(vendor)
        return vendor

    def create_item(self, item: ItemModel) -> ItemModel:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def save(self, obj):
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj) -> None:
        self.db.delete(obj)
        self.db.commit()

    def item_in_use(self, item_id: int) -> bool:
        """Pozycja jest w jakims koszyku albo w historii zamowien."""
        return bool(
            self.db.execute(
                select(
                    or_(
                        exists().where(CartItemModel.item_id == item_id),
                        exists().where(OrderItemModel.item_id == item_id),
                    )
                )
            ).scalar()
        )

    def vendor_in_use(self, vendor_id: int) -> bool:
        return bool(
            self.db.execute(
                select(
                    or_(
                        exists().where(ItemModel.vendor_id == vendor_id),
                        exists().where(OrderModel.vendor_id == vendor_id),
                        exists().where(CartModel.vendor_id == vendor_id),
                        exists().where(TableModel.vendor_id == vendor_id),
                    )
                )
            ).scalar()
        )
