# event_planner/utils/security.py
# Password hashing and token issuance

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from event_planner.config.settings import Settings
from event_planner.models.user import User

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or a password bcrypt refuses to process
        return False


class CredentialService:
    """Issues and verifies signed JWTs.

    Access tokens are short-lived and signed with ``SECRET_KEY``; refresh
    tokens live for days and are signed with ``REFRESH_SECRET_KEY``. Both
    carry the user's ``id`` and ``role`` plus a ``type`` claim so one kind
    can never be used in place of the other.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def _encode(self, user: User, token_type: str, expires_delta: timedelta, secret: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user.email,
            "id": user.id,
            "role": user.role,
            "type": token_type,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, secret, algorithm=self.settings.algorithm)

    def issue(self, user: User) -> str:
        return self._encode(
            user,
            ACCESS_TOKEN,
            timedelta(minutes=self.settings.access_token_expire_minutes),
            self.settings.secret_key,
        )

    def issue_refresh(self, user: User) -> str:
        return self._encode(
            user,
            REFRESH_TOKEN,
            timedelta(days=self.settings.refresh_token_expire_days),
            self.settings.refresh_secret_key,
        )

    def verify(self, token: str, token_type: str = ACCESS_TOKEN) -> Optional[Dict[str, Any]]:
        """Verify a token and return its claims, or None if it is not valid"""
        secret = self.settings.secret_key if token_type == ACCESS_TOKEN else self.settings.refresh_secret_key
        try:
            payload = jwt.decode(token, secret, algorithms=[self.settings.algorithm])
        except JWTError:
            return None
        if payload.get("type") != token_type or not isinstance(payload.get("id"), int):
            return None
        return payload
