"""
Organization user model
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from gms.core.database import Base
from gms.validation.rules import USER_NAME_MAX_LENGTH, EMAIL_MAX_LENGTH, ROLE_NAME_MAX_LENGTH


class User(Base):
    """Login account attached to an organization; created with the organization's admin"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    user_name = Column(String(USER_NAME_MAX_LENGTH), unique=True, index=True, nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role_name = Column(String(ROLE_NAME_MAX_LENGTH), nullable=False, index=True)
    organization_id = Column(Integer, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)

    # Status
    is_active = Column(Boolean, default=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    organization = relationship("Organization", back_populates="users")

    def __repr__(self):
        return f"<User {self.user_name} ({self.role_name})>"
