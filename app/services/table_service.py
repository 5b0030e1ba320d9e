# app/services/table_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.data.models.table import TableModel
from app.domain.errors import NotFoundError, ValidationError
from app.repos.catalog_repo import CatalogRepo
from app.repos.table_repo import TableRepo
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

TABLE_FIELDS = ("name", "customer_id", "is_available", "is_needs_service")


class TableService:
    """Stoliki w lokalu: kto siedzi, czy wolny, czy wola obsluge."""

    def __init__(self, db: Session):
        self.repo = TableRepo(db)
        self.catalog = CatalogRepo(db)
        self.users = UserRepo(db)

    def get_table(self, table_id: int) -> TableModel:
        table = self.repo.get_table(table_id)
        if not table:
            raise NotFoundError("Table does not exist")
        return table

    def list_tables(self, vendor_id: int | None = None) -> List[TableModel]:
        if vendor_id is not None and not self.catalog.get_vendor(vendor_id):
            raise NotFoundError("Vendor does not exist")
        return self.repo.list_tables(vendor_id)

    def create_table(
        self,
        vendor_id: int,
        name: str,
        customer_id: int | None = None,
        is_available: bool = True,
        is_needs_service: bool = False,
    ) -> TableModel:
        name = self._name(name)
        if not self.catalog.get_vendor(vendor_id):
            raise NotFoundError("Vendor does not exist")
        self._check_customer(customer_id)

        table = self.repo.create_table(
            TableModel(
                name=name,
                vendor_id=vendor_id,
                customer_id=customer_id,
                is_available=is_available,
                is_needs_service=is_needs_service,
            )
        )
        logger.info("Table created", table_id=table.id, vendor_id=vendor_id)
        return table

    def update_table(self, table_id: int, changes: Dict[str, Any]) -> TableModel:
        """Czesciowa aktualizacja, customer_id=None zwalnia stolik."""
        table = self.get_table(table_id)

        unknown = set(changes) - set(TABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown table fields: {sorted(unknown)}")

        if "name" in changes:
            table.name = self._name(changes["name"])

        if "customer_id" in changes:
            self._check_customer(changes["customer_id"])
            table.customer_id = changes["customer_id"]

        for flag in ("is_available", "is_needs_service"):
            if flag in changes:
                if changes[flag] is None:
                    raise ValidationError(f"{flag} cannot be null")
                setattr(table, flag, bool(changes[flag]))

        return self.repo.save_table(table)

    def delete_table(self, table_id: int) -> None:
        table = self.get_table(table_id)
        self.repo.delete_table(table)
        logger.info("Table deleted", table_id=table_id)

    def _name(self, name: str | None) -> str:
        if not name or not name.strip():
            raise ValidationError("Table name is required")
        return name.strip()

    def _check_customer(self, customer_id: int | None) -> None:
        if customer_id is not None and not self.users.get_user(customer_id):
            raise NotFoundError("User not found")
