from fastapi import APIRouter, HTTPException, Path

from jurisdiction.errors import UnknownJurisdiction
from jurisdiction.jurisdiction import Jurisdiction
from jurisdiction.schemas.jurisdiction import JurisdictionResponse

router = APIRouter(prefix="/jurisdictions", tags=["jurisdictions"])


@router.get("", response_model=list[JurisdictionResponse])
async def list_jurisdictions():
    return [JurisdictionResponse.from_jurisdiction(j) for j in Jurisdiction.all()]


@router.get("/numeric/{country_code}", response_model=JurisdictionResponse)
async def get_by_numeric(
    country_code: int = Path(..., ge=0, le=999, description="ISO 3166-1 numeric code"),
):
    try:
        jurisdiction = Jurisdiction.from_numeric(country_code)
    except UnknownJurisdiction as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return JurisdictionResponse.from_jurisdiction(jurisdiction)


@router.get("/{code}", response_model=JurisdictionResponse)
async def get_jurisdiction(code: str):
    """Look up an alpha-2 or alpha-3 code (case-insensitive)."""
    try:
        jurisdiction = Jurisdiction.parse(code)
    except UnknownJurisdiction as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return JurisdictionResponse.from_jurisdiction(jurisdiction)
