import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import (
    BadRequestException,
    InvalidCredentialsException,
    InvalidRoleException,
)
from app.core.security import burn_password_check, verify_password
from app.models.admin import Admin
from app.models.student import Student

logger = logging.getLogger(__name__)

ROLE_MODELS = {
    "student": (Student, Student.student_id),
    "admin": (Admin, Admin.email),
}


def _row_to_dict(row) -> Dict[str, Any]:
    """Column values of a row, minus the password hash."""
    return {
        column.name: getattr(row, column.name)
        for column in row.__table__.columns
        if column.name != "password_hash"
    }


def authenticate(
    db: Session,
    user_id: Optional[str],
    password: Optional[str],
    role: Optional[str],
    bcrypt_rounds: int = 10,
) -> Dict[str, Any]:
    """
    Check a login and return the user's row without its password hash.

    An unknown id and a wrong password both raise InvalidCredentialsException
    with the same message.
    """
    if not user_id or not password or not role:
        raise BadRequestException("ID, password, and role are required.")
    if role not in ROLE_MODELS:
        raise InvalidRoleException()

    model, key = ROLE_MODELS[role]
    user = db.query(model).filter(key == user_id).first()

    if user is None:
        burn_password_check(password, rounds=bcrypt_rounds)
        logger.info(f"Failed {role} login")
        raise InvalidCredentialsException()

    if not verify_password(password, user.password_hash):
        logger.info(f"Failed {role} login")
        raise InvalidCredentialsException()

    logger.info(f"{role.capitalize()} {user_id} logged in")
    return _row_to_dict(user)
