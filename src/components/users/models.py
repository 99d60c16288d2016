from dataclasses import dataclass

from src.domain.entities import User


@dataclass
class CreateUserInput:
    user_id: int
    item: str


@dataclass
class UpdateUserInput:
    user: User
    item: str | None


@dataclass
class UserOutput:
    user: User | None = None
    success: bool = False
    error: str | None = None


@dataclass
class UpdateUserOutput:
    user: User
    changed: bool = False
