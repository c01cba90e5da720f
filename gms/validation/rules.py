"""
Organization registration rule table.

Declared once and shared by the REST endpoint and the form view-model, so the
two validation call sites cannot drift apart. Field names are the wire names.
"""
import enum
import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple

from gms.core.config import settings

# ASCII digits only
PHONE_PATTERN = re.compile(r"(?:\+92|0)\d{10}", re.ASCII)
NTN_PATTERN = re.compile(r"\d{7}-\d", re.ASCII)
STRN_PATTERN = re.compile(r"\d{13}", re.ASCII)

# Column sizes of the organizations/users tables
ORGANIZATION_ID_MAX_LENGTH = 64
NAME_MAX_LENGTH = 255
LOGO_MAX_LENGTH = 1024
LOCATION_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20
TAX_ID_MAX_LENGTH = 20
USER_NAME_MAX_LENGTH = 150
ROLE_NAME_MAX_LENGTH = 50


class FieldKind(str, enum.Enum):
    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    PATTERN = "pattern"
    PROVINCE = "province"
    CITY = "city"
    DATE = "date"


@dataclass(frozen=True)
class FieldRule:
    field: str
    attribute: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    pattern: Optional[Pattern[str]] = None
    format_hint: Optional[str] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    default: Optional[str] = None
    depends_on: Optional[str] = None   # CITY: the province field it belongs to
    not_before: Optional[str] = None   # DATE: field whose date this one may not precede
    not_future: bool = False


ORGANIZATION_RULES: Tuple[FieldRule, ...] = (
    FieldRule("organizationId", "organization_id", "Organization ID", max_length=ORGANIZATION_ID_MAX_LENGTH),
    FieldRule("name", "name", "Organization name", required=True, max_length=NAME_MAX_LENGTH),
    FieldRule("organizationLogo", "organization_logo", "Organization logo", max_length=LOGO_MAX_LENGTH),
    FieldRule(
        "province", "province", "Province", FieldKind.PROVINCE, required=True, max_length=LOCATION_MAX_LENGTH,
    ),
    FieldRule(
        "city", "city", "City", FieldKind.CITY, required=True, depends_on="province",
        max_length=LOCATION_MAX_LENGTH,
    ),
    FieldRule(
        "phoneNumber", "phone_number", "Phone number", FieldKind.PATTERN, required=True,
        pattern=PHONE_PATTERN, format_hint="+92XXXXXXXXXX or 0XXXXXXXXXX",
    ),
    FieldRule(
        "phoneNumber2", "phone_number2", "Secondary phone number", FieldKind.PATTERN,
        pattern=PHONE_PATTERN, format_hint="+92XXXXXXXXXX or 0XXXXXXXXXX",
    ),
    FieldRule("address", "address", "Address", required=True),
    FieldRule("addressLine2", "address_line2", "Address line 2"),
    FieldRule("email", "email", "Email", FieldKind.EMAIL, required=True, max_length=EMAIL_MAX_LENGTH),
    FieldRule("userName", "user_name", "Username", required=True, max_length=USER_NAME_MAX_LENGTH),
    FieldRule(
        "password", "password", "Password", FieldKind.PASSWORD, required=True,
        min_length=settings.PASSWORD_MIN_LENGTH,
    ),
    FieldRule(
        "roleName", "role_name", "Role", required=True, default=settings.DEFAULT_ROLE_NAME,
        max_length=ROLE_NAME_MAX_LENGTH,
    ),
    FieldRule(
        "ntnNumber", "ntn_number", "NTN number", FieldKind.PATTERN,
        pattern=NTN_PATTERN, format_hint="1234567-8",
    ),
    FieldRule(
        "strnNumber", "strn_number", "STRN number", FieldKind.PATTERN,
        pattern=STRN_PATTERN, format_hint="13 digits",
    ),
    FieldRule("registrationDate", "registration_date", "Registration date", FieldKind.DATE, not_future=True),
    FieldRule(
        "contractExpiryDate", "contract_expiry_date", "Contract expiry date", FieldKind.DATE,
        not_before="registrationDate",
    ),
)

FIELD_NAMES: Tuple[str, ...] = tuple(rule.field for rule in ORGANIZATION_RULES)
REQUIRED_FIELDS: Tuple[str, ...] = tuple(
    rule.field for rule in ORGANIZATION_RULES if rule.required and rule.default is None
)
