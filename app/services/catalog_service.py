# app/services/catalog_service.py
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import List

from sqlalchemy.orm import Session

from app.data.models.item import ItemModel
from app.data.models.vendor import VendorModel
from app.domain.errors import ConflictError, NotFoundError, ValidationError
from app.domain.money import to_money
from app.repos.catalog_repo import CatalogRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def to_price(value) -> Decimal:
    """Cena jako Decimal z dwoma miejscami po przecinku, musi byc > 0."""
    try:
        if not Decimal(str(value)).is_finite():
            raise ValidationError("Price must be a finite number")
        price = to_money(value)
    except (InvalidOperation, ValueError):
        raise ValidationError("Price must be a number")

    if price <= 0:
        raise ValidationError("Price must be greater than 0")
    return price


class CatalogService:
    """
    Katalog vendorow i ich pozycji.
    Dla koszyka tylko odczyt (get_item), reszta to proste CRUD dla panelu vendora.
    """

    def __init__(self, db: Session):
        self.repo = CatalogRepo(db)

    def get_item(self, item_id: int) -> ItemModel:
        item = self.repo.get_item(item_id)
        if not item:
            raise NotFoundError("Item does not exist")
        return item

    def get_vendor(self, vendor_id: int) -> VendorModel:
        vendor = self.repo.get_vendor(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor does not exist")
        return vendor

    def list_vendor_items(self, vendor_id: int) -> List[ItemModel]:
        self.get_vendor(vendor_id)
        return self.repo.list_vendor_items(vendor_id)

    def create_vendor(self, name: str) -> VendorModel:
        if not name or not name.strip():
            raise ValidationError("Vendor name is required")

        vendor = self.repo.create_vendor(VendorModel(name=name.strip()))
        logger.info("Vendor created", vendor_id=vendor.id)
        return vendor

    def create_item(self, vendor_id: int, name: str, price) -> ItemModel:
        if not name or not name.strip():
            raise ValidationError("Item name is required")

        self.get_vendor(vendor_id)

        item = self.repo.create_item(
            ItemModel(
                vendor_id=vendor_id,
                name=name.strip(),
                price=to_price(price),
            )
        )
        logger.info("Item created", item_id=item.id, vendor_id=vendor_id)
        return item

    def update_item(self, item_id: int, name: str | None = None, price=None) -> ItemModel:
        # koszyki nie sa przeliczane od razu, nowa cena wchodzi przy
        # nastepnym recalculate albo przy checkoucie
        item = self.get_item(item_id)

        if name is not None:
            if not name.strip():
                raise ValidationError("Item name is required")
            item.name = name.strip()

        if price is not None:
            item.price = to_price(price)

        item.updated_at = datetime.now(timezone.utc)
        return self.repo.save(item)

    def delete_item(self, item_id: int) -> None:
        # historia zamowien trzyma item_id, a koszyk liczy cene z katalogu
        item = self.get_item(item_id)
        if self.repo.item_in_use(item_id):
            raise ConflictError("Item is referenced by a cart or an order")

        self.repo.delete(item)
        logger.info("Item deleted", item_id=item_id)

    def update_vendor(self, vendor_id: int, name: str) -> VendorModel:
        vendor = self.get_vendor(vendor_id)
        if not name or not name.strip():
            raise ValidationError("Vendor name is required")

        vendor.name = name.strip()
        vendor.updated_at = datetime.now(timezone.utc)
        return self.repo.save(vendor)

    def delete_vendor(self, vendor_id: int) -> None:
        vendor = self.get_vendor(vendor_id)
        if self.repo.vendor_in_use(vendor_id):
            raise ConflictError("Vendor still has items, tables, carts or orders")

        self.repo.delete(vendor)
        logger.info("Vendor deleted", vendor_id=vendor_id)
