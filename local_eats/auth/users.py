from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import bcrypt

from .config import DEFAULT_AUTH_CONFIG, AuthConfig

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class AdminAccount:
    username: str
    password_hash: bytes

    @classmethod
    def from_config(cls, config: AuthConfig) -> AdminAccount:
        hashed = bcrypt.hashpw(config.admin_password.encode(), bcrypt.gensalt())
        return cls(username=config.admin_username, password_hash=hashed)

    def check(self, username: str, password: str) -> bool:
        if username != self.username:
            return False
        return bcrypt.checkpw(password.encode(), self.password_hash)


# The only account; the site has no visitor logins
_admin = AdminAccount.from_config(DEFAULT_AUTH_CONFIG)


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Check admin credentials. Returns the session payload or ``None``."""
    if _admin.check(username, password):
        return {"username": _admin.username, "role": ADMIN_ROLE}
    return None
