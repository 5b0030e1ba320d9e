from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.errors import to_http
from app.data.database import get_db
from app.domain.errors import ServiceError
from app.services.user_service import UserService
from app.domain.schemas import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])

@router.post("/", response_model=UserRead)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.create_user(payload)
    except ServiceError as e:
        raise to_http(e)

@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.get_user(user_id)
    except ServiceError as e:
        raise to_http(e)

@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.update_user(user_id, payload)
    except ServiceError as e:
        raise to_http(e)

@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        service.delete_user(user_id)
    except ServiceError as e:
        raise to_http(e)
