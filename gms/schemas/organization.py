"""
Organization schemas
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, Dict, List
from datetime import date, datetime


class CamelModel(BaseModel):
    """Python attribute names, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class OrganizationRegistration(CamelModel):
    """Normalized registration record: validated, defaults applied, empty optionals absent"""
    model_config = ConfigDict(frozen=True)

    organization_id: Optional[str] = None
    name: str
    organization_logo: Optional[str] = None
    province: str
    city: str
    phone_number: str
    phone_number2: Optional[str] = None
    address: str
    address_line2: Optional[str] = None
    email: str
    user_name: str
    password: str
    role_name: str
    ntn_number: Optional[str] = None
    strn_number: Optional[str] = None
    registration_date: Optional[date] = None
    contract_expiry_date: Optional[date] = None

    def to_payload(self) -> Dict:
        """JSON body for the registration endpoint"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FieldErrorOut(BaseModel):
    code: str
    message: str


class OrganizationResponse(CamelModel):
    id: int
    organization_id: str
    name: str
    organization_logo: Optional[str] = None
    province: str
    city: str
    phone_number: str
    phone_number2: Optional[str] = None
    address: str
    address_line2: Optional[str] = None
    email: str
    ntn_number: Optional[str] = None
    strn_number: Optional[str] = None
    registration_date: Optional[date] = None
    contract_expiry_date: Optional[date] = None
    admin_user_name: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None


class OrganizationEnvelope(BaseModel):
    message: Optional[str] = None
    data: OrganizationResponse


class OrganizationListEnvelope(BaseModel):
    data: List[OrganizationResponse]


class ValidationReport(BaseModel):
    valid: bool
    errors: Dict[str, FieldErrorOut] = {}
    data: Optional[Dict] = None
