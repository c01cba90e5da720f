from gms.schemas.organization import (
    OrganizationRegistration,
    OrganizationResponse,
    OrganizationEnvelope,
    OrganizationListEnvelope,
    FieldErrorOut,
    ValidationReport,
)

__all__ = [
    "OrganizationRegistration",
    "OrganizationResponse",
    "OrganizationEnvelope",
    "OrganizationListEnvelope",
    "FieldErrorOut",
    "ValidationReport",
]
