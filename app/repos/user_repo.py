from sqlalchemy import exists, select
from sqlalchemy.orm import Session
from app.data.models.order import OrderModel
from app.data.models.user import UserModel

class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def save_user(self, user: UserModel) -> UserModel:
        self.db.commit()
        self.db.refresh(user)
        return user

    def has_orders(self, user_id: int) -> bool:
        return bool(
            self.db.execute(
                select(exists().where(OrderModel.customer_id == user_id))
            ).scalar()
        )

    def delete_user(self, user: UserModel) -> None:
        #bez commita, usuwanie idzie w transakcji serwisu
        self.db.delete(user)
