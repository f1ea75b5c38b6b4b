from sqlalchemy.orm import Session
from sqlalchemy import select
from app.db.models import User
from app.schemas.user import UserCreate
from app.core.security import get_password_hash
import uuid


def get_user_by_email(db: Session, email: str):
    result = db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


def get_user(db: Session, user_id: uuid.UUID):
    result = db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


def create_user(db: Session, user: UserCreate):
    db_user = User(
        id=uuid.uuid4(),
        name=user.name,
        email=user.email,
        password_hash=get_password_hash(user.password),
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
