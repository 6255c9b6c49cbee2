"""Authenticated principal passed into route handlers."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["root", "user"]


class Principal(BaseModel):
    """Identity resolved from the bearer token (id, login, role)."""

    model_config = ConfigDict(frozen=True)

    id: int
    login: str
    role: Role

    @property
    def is_root(self) -> bool:
        return self.role == "root"
