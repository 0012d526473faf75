"""
Mocked sign-in. SSO "succeeds" after a fixed delay; dev mode skips the wait.
"""
from __future__ import annotations

import asyncio
from dataclasses import asdict, dataclass
from typing import Optional

from darpan.config import LOGIN_DELAY_SECONDS


@dataclass(frozen=True)
class SessionUser:
    name: str
    email: str
    role: str

    def to_dict(self) -> dict:
        return asdict(self)


SSO_USER = SessionUser("Azure User", "user@azure.com", "Admin")
DEV_USER = SessionUser("Dev Admin", "dev@local", "Admin")


class SessionAuth:
    def __init__(self, delay: float = LOGIN_DELAY_SECONDS) -> None:
        self.delay = delay
        self.current_user: Optional[SessionUser] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    async def login_sso(self) -> SessionUser:
        await asyncio.sleep(self.delay)
        self.current_user = SSO_USER
        return self.current_user

    def login_dev(self) -> SessionUser:
        self.current_user = DEV_USER
        return self.current_user

    def logout(self) -> None:
        self.current_user = None
