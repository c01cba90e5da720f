"""
Location endpoints (provinces and their cities).
Served from the same reference data the registration validator checks against.
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import List

from gms.api.deps import reference_data_dependency
from gms.core.reference_data import ReferenceData

router = APIRouter()


@router.get("/provinces", response_model=List[dict])
async def list_provinces(
    reference_data: ReferenceData = Depends(reference_data_dependency)
):
    """List provinces in display order"""
    return [
        {"name": province, "city_count": len(reference_data.cities_for(province))}
        for province in reference_data.provinces
    ]


@router.get("/provinces/{province}/cities", response_model=List[dict])
async def list_cities(
    province: str,
    reference_data: ReferenceData = Depends(reference_data_dependency)
):
    """List cities of a province; province must match exactly"""
    if not reference_data.is_province(province):
        raise HTTPException(status_code=404, detail=f"Province not found: {province}")

    return [{"name": city} for city in reference_data.cities_for(province)]
