# biblioteca/services/auth_service.py
"""Access tokens for borrowers.

Tokens are random hex strings stored alongside the user they belong to.
A token stops resolving once its expiry passes; nothing else about it is
checked.
"""
import secrets
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session

from biblioteca.config import settings
from biblioteca.sa.models import User, UserToken, as_utc, utcnow
from biblioteca.sa.repositories import UserRepository
from biblioteca.utils.log import get_logger


class AuthService:
    def __init__(self, session: Session, token_ttl_minutes: Optional[int] = None):
        self.users = UserRepository(session)
        self.token_ttl = timedelta(minutes=token_ttl_minutes or settings.token_ttl_minutes)
        self.logger = get_logger(self.__class__.__name__)

    def issue_token(self, user: User, now: Optional[datetime] = None) -> UserToken:
        """Create a new token for the user, unique among stored tokens."""
        now = now or utcnow()
        while True:
            token = secrets.token_hex(32)
            if self.users.get_token(token) is None:
                break
        user_token = self.users.add_token(user.id, token, now + self.token_ttl)
        self.logger.info(f"Issued token for user {user.id}")
        return user_token

    def resolve_user_id(self, token: str, now: Optional[datetime] = None) -> Optional[str]:
        """Return the user id a token belongs to, or None if unknown or expired."""
        user_token = self.users.get_token(token)
        if user_token is None:
            return None
        if as_utc(user_token.expires_at) <= (now or utcnow()):
            self.logger.info(f"Expired token presented for user {user_token.user_id}")
            return None
        return user_token.user_id

    def revoke(self, token: str) -> bool:
        return self.users.delete_token(token)
