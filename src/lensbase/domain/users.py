"""Domain models for the signed-in user."""

from enum import StrEnum

from pydantic import BaseModel


class UserRole(StrEnum):
    """Access level of a user."""

    ADMIN = "ADMIN"
    USER = "USER"


class User(BaseModel):
    """Static profile of the signed-in user."""

    id: str
    name: str
    email: str
    role: UserRole
    avatar: str
