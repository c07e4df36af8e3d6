# biblioteca/sa/models/user.py
import uuid
from datetime import datetime
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, UTCDateTime, utcnow


def new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    """A borrower. The id is an opaque string handed out by the access layer."""
    __tablename__ = 'user'

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_user_id)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    registered_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    # Relationships
    loans = relationship('Loan', back_populates='borrower')
    tokens = relationship('UserToken', back_populates='user', cascade='all, delete-orphan')

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class UserToken(Base):
    __tablename__ = 'user_token'

    token: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    user = relationship('User', back_populates='tokens')
