from pydantic import BaseModel


class IntermediateRegionResponse(BaseModel):
    id: int
    name: str


class SubRegionResponse(BaseModel):
    id: int
    name: str
    intermediate_regions: list[IntermediateRegionResponse] = []


class RegionResponse(BaseModel):
    id: int
    name: str
    sub_regions: list[SubRegionResponse] = []
