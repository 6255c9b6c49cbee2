"""Users endpoints: read, create (or self-update), update and delete user accounts."""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_principal, require_root
from app.core.database import get_db
from app.schemas.auth import Principal
from app.schemas.user import (
    ErrorResponse,
    UserCreateBody,
    UserCreated,
    UserDeleteBody,
    UserId,
    UserRead,
    UserUpdateBody,
)
from app.services import users as user_store
from app.services.users import UserConflictError, UserValidationError

logger = logging.getLogger(__name__)
router = APIRouter()

ACCESS_DENIED = "Access denied."
USER_NOT_FOUND = "User not found."


def _error(status_code: int, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail=message)


def _required_fields(fields: str) -> HTTPException:
    return _error(status.HTTP_400_BAD_REQUEST, f"Required fields: {fields}.")


def _errors(*codes: int) -> dict[int | str, dict[str, Any]]:
    return {code: {"model": ErrorResponse} for code in codes}


def _json_body(model: type[BaseModel]) -> dict[str, Any]:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


async def get_json_payload(request: Request) -> dict[str, Any]:
    """
    Dependency: parse the request body as a JSON object.

    An empty body is an empty object; anything that is not a JSON object is a 400.
    """
    raw = (await request.body()).strip()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body.")
    if not isinstance(data, dict):
        raise _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body.")
    return data


def _str_field(data: dict[str, Any], name: str) -> str | None:
    value = data.get(name)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        raise _error(status.HTTP_400_BAD_REQUEST, f"Field {name} must be a string.")
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def _id_field(data: dict[str, Any]) -> int | None:
    value = data.get("id")
    if value is None:
        return None
    if isinstance(value, bool):
        raise _error(status.HTTP_400_BAD_REQUEST, "Field id must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise _error(status.HTTP_400_BAD_REQUEST, "Field id must be an integer.")


@router.get(
    "/{user_id:int}",
    response_model=UserRead,
    responses=_errors(401, 403, 404),
    summary="Get user by id",
)
def get_user_by_id(
    user_id: int,
    principal: Annotated[Principal, Depends(get_current_principal)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    """Return login, pass and phone. Non-root callers may only read their own row."""
    if not principal.is_root and principal.id != user_id:
        raise _error(status.HTTP_403_FORBIDDEN, ACCESS_DENIED)
    user = user_store.get_user(db, user_id)
    if user is None:
        raise _error(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    return UserRead(login=user.login, password=user.password, phone=user.phone)


@router.post(
    "",
    response_model=UserCreated,
    status_code=status.HTTP_201_CREATED,
    responses=_errors(400, 401, 403, 409),
    openapi_extra=_json_body(UserCreateBody),
    summary="Create user",
)
def post_user(
    principal: Annotated[Principal, Depends(get_current_principal)],
    data: Annotated[dict[str, Any], Depends(get_json_payload)],
    db: Annotated[Session, Depends(get_db)],
) -> UserCreated:
    """
    Create a user.

    Root inserts a new row. Any other caller must send their own login, and
    their existing row is overwritten with the given phone and pass instead.
    """
    login = _str_field(data, "login")
    phone = _str_field(data, "phone")
    password = _str_field(data, "pass")
    if login is None or phone is None or password is None:
        raise _required_fields("login, phone, pass")

    try:
        if principal.is_root:
            user = user_store.create_user(db, login, phone, password)
        else:
            if login != principal.login:
                raise _error(status.HTTP_403_FORBIDDEN, ACCESS_DENIED)
            user = user_store.get_user(db, principal.id)
            if user is None:
                raise _error(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
            user = user_store.update_user(db, user, phone, password)
    except UserValidationError as e:
        raise _error(status.HTTP_400_BAD_REQUEST, str(e))
    except UserConflictError as e:
        raise _error(status.HTTP_409_CONFLICT, str(e))

    logger.info("POST users completed", extra={"user_id": user.id, "actor": principal.login})
    return UserCreated(id=user.id, login=user.login, password=user.password, phone=user.phone)


@router.put(
    "",
    response_model=UserId,
    responses=_errors(400, 401, 403, 404, 409),
    openapi_extra=_json_body(UserUpdateBody),
    summary="Update user",
)
def put_user(
    principal: Annotated[Principal, Depends(get_current_principal)],
    data: Annotated[dict[str, Any], Depends(get_json_payload)],
    db: Annotated[Session, Depends(get_db)],
) -> UserId:
    """
    Update phone and pass of a user; root may also change the login.

    Non-root callers may only target their own id and may not change their login.
    """
    user_id = _id_field(data)
    login = _str_field(data, "login")
    phone = _str_field(data, "phone")
    password = _str_field(data, "pass")

    if user_id is None or phone is None or password is None or (principal.is_root and login is None):
        raise _required_fields("id, login, phone, pass" if principal.is_root else "id, phone, pass")

    if not principal.is_root and user_id != principal.id:
        raise _error(status.HTTP_403_FORBIDDEN, ACCESS_DENIED)

    user = user_store.get_user(db, user_id)
    if user is None:
        raise _error(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)

    if not principal.is_root and login is not None and login != principal.login:
        raise _error(status.HTTP_403_FORBIDDEN, "Login cannot be changed.")

    try:
        user_store.update_user(
            db,
            user,
            phone,
            password,
            login=login if principal.is_root else None,
        )
    except UserValidationError as e:
        raise _error(status.HTTP_400_BAD_REQUEST, str(e))
    except UserConflictError as e:
        raise _error(status.HTTP_409_CONFLICT, str(e))

    logger.info("PUT users completed", extra={"user_id": user_id, "actor": principal.login})
    return UserId(id=user_id)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_errors(400, 401, 403, 404),
    openapi_extra=_json_body(UserDeleteBody),
    summary="Delete user",
)
def delete_user(
    principal: Annotated[Principal, Depends(require_root)],
    data: Annotated[dict[str, Any], Depends(get_json_payload)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete a user by id (root only). Returns 204 with an empty body."""
    user_id = _id_field(data)
    if user_id is None:
        raise _required_fields("id")

    user = user_store.get_user(db, user_id)
    if user is None:
        raise _error(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)

    user_store.delete_user(db, user)
    logger.info("DELETE users completed", extra={"user_id": user_id, "actor": principal.login})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
