# biblioteca/sa/repositories/user.py
from datetime import datetime
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..models import User, UserToken


class UserRepository:
    """Repository for borrower identities and their access tokens."""

    def __init__(self, session: Session):
        self.session = session

    def create_user(self, first_name: str, last_name: str, email: str) -> User:
        """Create a new user.

        Raises:
            ValueError: If a user with the given email already exists
        """
        if self.get_by_email(email):
            raise ValueError(f"User with email '{email}' already exists")

        user = User(first_name=first_name, last_name=last_name, email=email)
        self.session.add(user)
        try:
            self.session.commit()
            return user
        except IntegrityError:
            self.session.rollback()
            raise ValueError(f"User with email '{email}' already exists")

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).first()

    def add_token(self, user_id: str, token: str, expires_at: datetime) -> UserToken:
        user_token = UserToken(token=token, user_id=user_id, expires_at=expires_at)
        self.session.add(user_token)
        self.session.commit()
        return user_token

    def get_token(self, token: str) -> Optional[UserToken]:
        return self.session.get(UserToken, token)

    def delete_token(self, token: str) -> bool:
        user_token = self.get_token(token)
        if not user_token:
            return False
        self.session.delete(user_token)
        self.session.commit()
        return True
