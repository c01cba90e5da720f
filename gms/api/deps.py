"""
Shared endpoint dependencies
"""
import logging
from fastapi import HTTPException, status

from gms.core.reference_data import ReferenceData, ReferenceDataError, get_reference_data
from gms.validation.validator import OrganizationRegistrationValidator

logger = logging.getLogger(__name__)


def reference_data_dependency() -> ReferenceData:
    """Process-wide reference data; 503 when it cannot be loaded"""
    try:
        return get_reference_data()
    except ReferenceDataError as e:
        logger.error(f"Reference data unavailable: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Reference data unavailable"
        )


def validator_dependency() -> OrganizationRegistrationValidator:
    return OrganizationRegistrationValidator(reference_data_dependency())
