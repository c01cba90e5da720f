"""
Organization model
"""
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from gms.core.database import Base
from gms.validation.rules import (
    ORGANIZATION_ID_MAX_LENGTH, NAME_MAX_LENGTH, LOGO_MAX_LENGTH, LOCATION_MAX_LENGTH,
    EMAIL_MAX_LENGTH, PHONE_MAX_LENGTH, TAX_ID_MAX_LENGTH,
)


class Organization(Base):
    """Registered organization (tenant)"""
    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, index=True)
    organization_id = Column(String(ORGANIZATION_ID_MAX_LENGTH), nullable=False, unique=True, index=True)  # ORG-XXXXXXXX when server-generated
    name = Column(String(NAME_MAX_LENGTH), nullable=False, index=True)
    organization_logo = Column(String(LOGO_MAX_LENGTH), nullable=True)

    # Location
    province = Column(String(LOCATION_MAX_LENGTH), nullable=False)
    city = Column(String(LOCATION_MAX_LENGTH), nullable=False)
    address = Column(Text, nullable=False)
    address_line2 = Column(Text, nullable=True)

    # Contact
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False, unique=True, index=True)
    phone_number = Column(String(PHONE_MAX_LENGTH), nullable=False)
    phone_number2 = Column(String(PHONE_MAX_LENGTH), nullable=True)

    # Tax registration
    ntn_number = Column(String(TAX_ID_MAX_LENGTH), nullable=True)
    strn_number = Column(String(TAX_ID_MAX_LENGTH), nullable=True)

    # Contract
    registration_date = Column(Date, nullable=True)
    contract_expiry_date = Column(Date, nullable=True)

    # Status
    is_active = Column(Boolean, default=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    users = relationship("User", back_populates="organization", cascade="all, delete-orphan")

    @property
    def admin_user_name(self):
        """Account created together with the organization"""
        if not self.users:
            return None
        return min(self.users, key=lambda u: u.id or 0).user_name

    def __repr__(self):
        return f"<Organization {self.organization_id} {self.name}>"
