"""Record types shared by the data compiler and the generated lookup tables."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CountryRecord:
    index: int  # canonical index, never reused
    alpha2: str
    alpha3: str
    numeric: int
    name: str
    region_id: int | None = None
    sub_region_id: int | None = None
    intermediate_region_id: int | None = None


@dataclass(frozen=True, slots=True)
class RegionRecord:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class SubRegionRecord:
    id: int
    name: str
    region_id: int


@dataclass(frozen=True, slots=True)
class IntermediateRegionRecord:
    id: int
    name: str
    sub_region_id: int
