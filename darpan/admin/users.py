"""
Role management — in-memory user directory.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Optional

from darpan.config import DEFAULT_ZONE, NO_ASSIGNMENT, USER_ROLES
from darpan.data.seed import SAMPLE_USERS

_EDITABLE = {"name", "email", "role", "zone", "assigned_survey", "status"}


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    role: str = "Admin"
    status: str = "Active"
    zone: str = DEFAULT_ZONE
    assigned_survey: str = NO_ASSIGNMENT

    def to_dict(self) -> dict:
        return asdict(self)


def _check_role(role: str) -> None:
    if role not in USER_ROLES:
        raise ValueError(f"Invalid role: {role}. Valid: {USER_ROLES}")


class UserDirectory:
    def __init__(self, seed: bool = True) -> None:
        self._users: list[User] = [User(**u) for u in SAMPLE_USERS] if seed else []
        self._next_id = max((u.id for u in self._users), default=0) + 1

    def list(self) -> list[User]:
        return list(self._users)

    def get(self, user_id: int) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def add(
        self,
        name: str,
        email: str,
        role: str = "Admin",
        zone: str = DEFAULT_ZONE,
        assigned_survey: str = NO_ASSIGNMENT,
    ) -> User:
        """Invite a user; new users start Active."""
        _check_role(role)
        user = User(self._next_id, name, email, role, "Active", zone, assigned_survey)
        self._next_id += 1
        self._users.append(user)
        return user

    def update(self, user_id: int, **changes) -> User:
        """Merge changes into an existing user. Raises KeyError if absent."""
        unknown = set(changes) - _EDITABLE
        if unknown:
            raise ValueError(f"Fields not editable: {sorted(unknown)}")
        if "role" in changes:
            _check_role(changes["role"])
        for i, user in enumerate(self._users):
            if user.id == user_id:
                self._users[i] = replace(user, **changes)
                return self._users[i]
        raise KeyError(user_id)

    def remove(self, user_id: int) -> User:
        """Delete a user and return it. Raises KeyError if absent."""
        for i, user in enumerate(self._users):
            if user.id == user_id:
                return self._users.pop(i)
        raise KeyError(user_id)
