"""Request/response schemas for the users endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """Response body for GET /{id}."""

    model_config = ConfigDict(populate_by_name=True)

    login: str
    password: str = Field(..., alias="pass")
    phone: str


class UserCreated(BaseModel):
    """Response body for POST: the full row."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    login: str
    password: str = Field(..., alias="pass")
    phone: str


class UserId(BaseModel):
    """Response body for PUT."""

    id: int


class ErrorResponse(BaseModel):
    """Body of every error response."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable error message")


# Request bodies are parsed by hand so that missing fields and malformed JSON
# produce the documented messages; these models only describe them in OpenAPI.


class UserCreateBody(BaseModel):
    """Request body for POST."""

    model_config = ConfigDict(populate_by_name=True)

    login: str = Field(..., max_length=8)
    password: str = Field(..., alias="pass", max_length=8)
    phone: str = Field(..., max_length=8)


class UserUpdateBody(BaseModel):
    """Request body for PUT. `login` is required for root and must be unchanged otherwise."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    login: str | None = Field(default=None, max_length=8)
    password: str = Field(..., alias="pass", max_length=8)
    phone: str = Field(..., max_length=8)


class UserDeleteBody(BaseModel):
    """Request body for DELETE."""

    id: int
