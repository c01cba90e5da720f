from gms.validation.errors import ErrorCode, FieldError, format_errors, serialize_errors, deserialize_errors
from gms.validation.rules import FieldKind, FieldRule, ORGANIZATION_RULES, FIELD_NAMES, REQUIRED_FIELDS
from gms.validation.validator import (
    OrganizationRegistrationValidator,
    ValidationResult,
    get_validator,
    parse_date,
    validate_organization,
)

__all__ = [
    "ErrorCode",
    "FieldError",
    "format_errors",
    "serialize_errors",
    "deserialize_errors",
    "FieldKind",
    "FieldRule",
    "ORGANIZATION_RULES",
    "FIELD_NAMES",
    "REQUIRED_FIELDS",
    "OrganizationRegistrationValidator",
    "ValidationResult",
    "get_validator",
    "parse_date",
    "validate_organization",
]
