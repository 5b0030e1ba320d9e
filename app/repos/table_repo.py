# app/repos/table_repo.py
from typing import List

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.data.models.table import TableModel


class TableRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_table(self, table_id: int) -> TableModel | None:
        return self.db.get(TableModel, table_id)

    def list_tables(self, vendor_id: int | None = None) -> List[TableModel]:
        stmt = select(TableModel).order_by(TableModel.id)
        if vendor_id is not None:
            stmt = stmt.where(TableModel.vendor_id == vendor_id)
        return list(self.db.execute(stmt).scalars().all())

    def create_table(self, table: TableModel) -> TableModel:
        self.db.add(table)
        self.db.commit()
        self.db.refresh(table)
        return table

    def save_table(self, table: TableModel) -> TableModel:
        self.db.commit()
        self.db.refresh(table)
        return table

    def delete_table(self, table: TableModel) -> None:
        self.db.delete(table)
        self.db.commit()

    def release_customer(self, customer_id: int) -> None:
        #bez commita, czesc transakcji usuwania uzytkownika
        self.db.execute(
            update(TableModel)
            .where(TableModel.customer_id == customer_id)
            .values(customer_id=None, is_available=True)
        )
