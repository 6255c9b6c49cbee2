"""User store: lookups and single-transaction writes on the users table."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import FIELD_MAX_LEN, ID_MAX, User

logger = logging.getLogger(__name__)


class UserValidationError(Exception):
    """Field values violate a column constraint (length)."""


class UserConflictError(Exception):
    """The (login, pass) pair is already used by another user."""


def get_user(session: Session, user_id: int) -> User | None:
    """Return the user with this id, or None (also for ids outside the column range)."""
    if not 0 < user_id <= ID_MAX:
        return None
    return session.get(User, user_id)


def get_user_by_login(session: Session, login: str) -> User | None:
    """Return the first user with this login (lowest id), or None."""
    return (
        session.query(User)
        .filter(User.login == login)
        .order_by(User.id)
        .first()
    )


def validate_fields(login: str, phone: str, password: str) -> None:
    """Raise UserValidationError listing each field longer than FIELD_MAX_LEN."""
    problems = [
        f"{name}: This value is too long. It should have {FIELD_MAX_LEN} characters or less."
        for name, value in (("login", login), ("phone", phone), ("pass", password))
        if len(value) > FIELD_MAX_LEN
    ]
    if problems:
        raise UserValidationError(" ".join(problems))


def _ensure_unique(session: Session, login: str, password: str, exclude_id: int | None) -> None:
    query = session.query(User.id).filter(User.login == login, User.password == password)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first() is not None:
        raise UserConflictError("User already exists.")


def _commit(session: Session) -> None:
    try:
        session.commit()
    except IntegrityError as e:
        # Concurrent writer won the race on uniq_login_pass.
        session.rollback()
        raise UserConflictError("User already exists.") from e


def create_user(session: Session, login: str, phone: str, password: str) -> User:
    """Insert a new user. Raises UserValidationError or UserConflictError."""
    validate_fields(login, phone, password)
    _ensure_unique(session, login, password, exclude_id=None)
    user = User(login=login, phone=phone, password=password)
    session.add(user)
    _commit(session)
    session.refresh(user)
    logger.info("User created", extra={"user_id": user.id})
    return user


def update_user(
    session: Session,
    user: User,
    phone: str,
    password: str,
    login: str | None = None,
) -> User:
    """
    Overwrite phone and pass (and login, when given) on an existing user.

    Values are validated before the row is touched, so a rejected update
    leaves the loaded instance unchanged.
    """
    new_login = user.login if login is None else login
    validate_fields(new_login, phone, password)
    _ensure_unique(session, new_login, password, exclude_id=user.id)
    user.login = new_login
    user.phone = phone
    user.password = password
    _commit(session)
    session.refresh(user)
    logger.info("User updated", extra={"user_id": user.id})
    return user


def delete_user(session: Session, user: User) -> None:
    user_id = user.id
    session.delete(user)
    session.commit()
    logger.info("User deleted", extra={"user_id": user_id})
