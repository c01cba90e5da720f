"""
Organization endpoints
"""
import logging
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from gms.api.deps import validator_dependency
from gms.core.database import get_db
from gms.schemas.organization import (
    OrganizationEnvelope,
    OrganizationListEnvelope,
    OrganizationResponse,
    ValidationReport,
)
from gms.services import organization_service
from gms.services.organization_service import DuplicateOrganizationError, OrganizationNotFoundError
from gms.validation import OrganizationRegistrationValidator, serialize_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=OrganizationListEnvelope)
async def list_organizations(
    search: Optional[str] = Query(None, description="Case-insensitive match on name or email"),
    db: Session = Depends(get_db)
):
    """List organizations"""
    orgs = organization_service.list_organizations(db, search)
    return {"data": [OrganizationResponse.model_validate(org) for org in orgs]}


@router.post("/", response_model=OrganizationEnvelope, status_code=status.HTTP_201_CREATED)
async def create_organization(
    payload: dict = Body(...),
    validator: OrganizationRegistrationValidator = Depends(validator_dependency),
    db: Session = Depends(get_db)
):
    """Register an organization and its admin account"""
    result = validator.validate(payload)
    if not result.ok:
        logger.info(f"Rejected organization registration: {sorted(result.errors)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Organization registration is invalid",
                "errors": serialize_errors(result.errors),
            }
        )

    try:
        org = organization_service.create_organization(db, result.record)
    except DuplicateOrganizationError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"message": str(e), "field": e.field}
        )

    return {
        "message": "Organization created successfully",
        "data": OrganizationResponse.model_validate(org),
    }


@router.post("/validate", response_model=ValidationReport)
async def validate_organization(
    payload: dict = Body(...),
    validator: OrganizationRegistrationValidator = Depends(validator_dependency),
):
    """Pre-flight check with the same rules as registration; nothing is stored"""
    result = validator.validate(payload)
    return {
        "valid": result.ok,
        "errors": serialize_errors(result.errors),
        "data": result.record.to_payload() if result.ok else None,
    }


@router.get("/{organization_id}", response_model=OrganizationEnvelope)
async def get_organization(
    organization_id: int,
    db: Session = Depends(get_db)
):
    """Get organization details"""
    try:
        org = organization_service.get_organization(db, organization_id)
    except OrganizationNotFoundError:
        raise HTTPException(status_code=404, detail="Organization not found")

    return {"data": OrganizationResponse.model_validate(org)}


@router.delete("/{organization_id}")
async def delete_organization(
    organization_id: int,
    db: Session = Depends(get_db)
):
    """Delete an organization and its accounts"""
    try:
        organization_service.delete_organization(db, organization_id)
    except OrganizationNotFoundError:
        raise HTTPException(status_code=404, detail="Organization not found")

    return {"message": "Organization deleted successfully"}
