"""User persistence and password verification."""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.user import User
from .errors import UserExistsError
from .security import hash_password, verify_password


def add_user(
    db: Session,
    name: str,
    password: str,
    phone: Optional[str] = None,
    role: str = "user",
) -> str:
    """Create a user with a bcrypt-hashed password and return its id.

    Raises UserExistsError if the name is taken.
    """
    if db.query(User.id).filter(User.name == name).first():
        raise UserExistsError(name)

    user = User(name=name, password=hash_password(password), phone=phone or None, role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent signup with the same name
        db.rollback()
        raise UserExistsError(name)
    db.refresh(user)
    return user.id


def find_user(db: Session, name: str, password: str) -> Optional[User]:
    """Return the user only if the name exists and the password matches.

    Unknown name and wrong password both give None.
    """
    user = db.query(User).filter(User.name == name).first()
    if not verify_password(password, user.password if user else None):
        return None
    return user


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    if not user_id:
        return None
    return db.query(User).filter(User.id == str(user_id)).first()
