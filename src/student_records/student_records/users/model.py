from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: password is kept as plaintext, matching what the login form compares against.
    """

    id: str
    username: str
    password: str
    role: Role


def user_to_record(user: User) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "password": user.password,
        "role": user.role.value,
    }


def user_from_record(row: dict) -> User:
    return User(
        id=str(row["id"]),
        username=str(row["username"]),
        password=str(row["password"]),
        role=Role(row["role"]),
    )
