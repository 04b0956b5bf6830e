from fastapi import APIRouter, HTTPException

from jurisdiction.jurisdiction import Jurisdiction
from jurisdiction.region import Region, in_region
from jurisdiction.schemas.region import (
    IntermediateRegionResponse,
    RegionResponse,
    SubRegionResponse,
)
from jurisdiction.tables import get_tables

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get("", response_model=list[RegionResponse])
async def list_regions():
    """UN M49 regions with their sub-regions and intermediate regions."""
    tables = get_tables()
    intermediates: dict[int, list[IntermediateRegionResponse]] = {}
    for record in tables.intermediate_regions.values():
        intermediates.setdefault(record.sub_region_id, []).append(
            IntermediateRegionResponse(id=record.id, name=record.name)
        )

    subs: dict[int, list[SubRegionResponse]] = {}
    for record in tables.sub_regions.values():
        subs.setdefault(record.region_id, []).append(
            SubRegionResponse(
                id=record.id,
                name=record.name,
                intermediate_regions=intermediates.get(record.id, []),
            )
        )

    return [
        RegionResponse(id=record.id, name=record.name, sub_regions=subs.get(record.id, []))
        for record in tables.regions.values()
    ]


@router.get("/{region_id}/jurisdictions", response_model=list[Jurisdiction])
async def list_region_jurisdictions(region_id: int):
    if region_id not in get_tables().regions:
        raise HTTPException(status_code=404, detail=f"Unknown region {region_id}")
    return in_region(Region(region_id))
