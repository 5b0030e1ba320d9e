from sqlalchemy.orm import Session
from app.data.database import transaction
from app.data.models.user import UserModel
from app.domain.errors import ConflictError, NotFoundError
from app.repos.cart_repo import CartRepo
from app.repos.table_repo import TableRepo
from app.repos.user_repo import UserRepo
from app.domain.schemas import UserCreate, UserRead, UserUpdate
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        #idempotentne po emailu
        existing = self.repo.get_user_by_email(payload.email)
        if existing:
            return UserRead.model_validate(existing)

        user = UserModel(name=payload.name, email=payload.email)
        created = self.repo.create_user(user)
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        return UserRead.model_validate(self._get(user_id))

    def update_user(self, user_id: int, payload: UserUpdate) -> UserRead:
        user = self._get(user_id)

        if payload.email is not None and payload.email != user.email:
            other = self.repo.get_user_by_email(payload.email)
            if other:
                raise ConflictError("Email is already taken")
            user.email = payload.email

        if payload.name is not None:
            user.name = payload.name

        return UserRead.model_validate(self.repo.save_user(user))

    def delete_user(self, user_id: int) -> None:
        """
        Usuwa klienta razem z koszykiem i zwalnia jego stoliki.
        Klient z historia zamowien zostaje, zamowienia wskazuja na niego.
        """
        user = self._get(user_id)
        if self.repo.has_orders(user_id):
            raise ConflictError("User has orders and cannot be deleted")

        with transaction(self.db, "delete user"):
            CartRepo(self.db).delete_cart(user_id)
            TableRepo(self.db).release_customer(user_id)
            self.repo.delete_user(user)

        logger.info("User deleted", user_id=user_id)

    def _get(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
