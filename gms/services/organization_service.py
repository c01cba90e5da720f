"""
Organization persistence: create, list, fetch and delete registered organizations.
Input to create_organization is always a record that already passed validation.
"""
import logging
import uuid
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from gms.core.security import get_password_hash
from gms.models.organization import Organization
from gms.models.user import User
from gms.schemas.organization import OrganizationRegistration

logger = logging.getLogger(__name__)


class DuplicateOrganizationError(Exception):
    """An organization or admin account with the same identifying value exists"""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} '{value}' is already registered")


class OrganizationNotFoundError(Exception):
    def __init__(self, organization_id: int):
        self.organization_id = organization_id
        super().__init__(f"Organization {organization_id} not found")


def generate_organization_id() -> str:
    return f"ORG-{uuid.uuid4().hex[:8].upper()}"


def _check_duplicates(db: Session, record: OrganizationRegistration, organization_id: str) -> None:
    if db.query(Organization.id).filter(Organization.organization_id == organization_id).first():
        raise DuplicateOrganizationError("organizationId", organization_id)
    if db.query(Organization.id).filter(func.lower(Organization.email) == record.email.lower()).first():
        raise DuplicateOrganizationError("email", record.email)
    if db.query(User.id).filter(User.user_name == record.user_name).first():
        raise DuplicateOrganizationError("userName", record.user_name)


def create_organization(db: Session, record: OrganizationRegistration) -> Organization:
    """Persist the organization and its admin account; server generates organizationId when absent"""
    organization_id = record.organization_id or generate_organization_id()
    _check_duplicates(db, record, organization_id)

    org = Organization(
        organization_id=organization_id,
        name=record.name,
        organization_logo=record.organization_logo,
        province=record.province,
        city=record.city,
        address=record.address,
        address_line2=record.address_line2,
        email=record.email,
        phone_number=record.phone_number,
        phone_number2=record.phone_number2,
        ntn_number=record.ntn_number,
        strn_number=record.strn_number,
        registration_date=record.registration_date,
        contract_expiry_date=record.contract_expiry_date,
        is_active=True,
    )
    org.users.append(User(
        user_name=record.user_name,
        email=record.email,
        password_hash=get_password_hash(record.password),
        role_name=record.role_name,
        is_active=True,
    ))

    db.add(org)
    try:
        db.commit()
    except IntegrityError as e:
        # lost a race with a concurrent registration of the same values
        db.rollback()
        logger.warning(f"Integrity error creating organization {organization_id}: {e.orig}")
        _check_duplicates(db, record, organization_id)
        raise DuplicateOrganizationError("organizationId", organization_id) from e
    db.refresh(org)

    logger.info(f"Created organization {org.organization_id} (id={org.id}) in {org.city}, {org.province}")
    return org


def list_organizations(db: Session, search: Optional[str] = None) -> List[Organization]:
    """Newest first; search matches name or email, case-insensitively"""
    query = db.query(Organization).options(selectinload(Organization.users))

    term = (search or "").strip().lower()
    if term:
        # match % and _ literally
        escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{escaped}%"
        query = query.filter(or_(
            func.lower(Organization.name).like(pattern, escape="\\"),
            func.lower(Organization.email).like(pattern, escape="\\"),
        ))

    return query.order_by(Organization.created_at.desc(), Organization.id.desc()).all()


def get_organization(db: Session, organization_id: int) -> Organization:
    org = db.query(Organization).filter(Organization.id == organization_id).first()
    if not org:
        raise OrganizationNotFoundError(organization_id)
    return org


def delete_organization(db: Session, organization_id: int) -> None:
    """Delete the organization together with its user accounts"""
    org = get_organization(db, organization_id)
    db.delete(org)
    db.commit()
    logger.info(f"Deleted organization {org.organization_id} (id={organization_id})")
