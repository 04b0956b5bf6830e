"""UN M49 region classification for jurisdictions.

Sourced from the UN statistics division's standard country or area codes
for statistical use (M49): https://unstats.un.org/unsd/methodology/m49/overview

The base ``Jurisdiction`` facade works without this module. Region lookups
raise ``NoRegionClassification`` for unclassified jurisdictions (Antarctica)
and for every jurisdiction when the extension is disabled through
``ENABLE_REGIONS`` or the tables were compiled with ``--no-regions``.
"""

from collections.abc import Mapping

from jurisdiction.errors import NoRegionClassification
from jurisdiction.generated.regions import IntermediateRegion, Region, SubRegion
from jurisdiction.jurisdiction import Jurisdiction
from jurisdiction.tables import get_tables

__all__ = [
    "IntermediateRegion",
    "Region",
    "SubRegion",
    "in_intermediate_region",
    "in_region",
    "in_sub_region",
    "intermediate_region_of",
    "region_of",
    "sub_region_of",
]


def _classification(jurisdiction: Jurisdiction, level: str, attr: str) -> int:
    tables = get_tables()
    record = tables.countries[jurisdiction.index]
    if not tables.regions_enabled:
        raise NoRegionClassification(record.alpha2, level, "region classification is disabled")
    value = getattr(record, attr)
    if value is None:
        raise NoRegionClassification(record.alpha2, level)
    return value


def region_of(jurisdiction: Jurisdiction) -> Region:
    return Region(_classification(jurisdiction, "region", "region_id"))


def sub_region_of(jurisdiction: Jurisdiction) -> SubRegion:
    return SubRegion(_classification(jurisdiction, "sub-region", "sub_region_id"))


def intermediate_region_of(jurisdiction: Jurisdiction) -> IntermediateRegion:
    """Most jurisdictions have no intermediate region; those raise NoRegionClassification."""
    return IntermediateRegion(_classification(jurisdiction, "intermediate region", "intermediate_region_id"))


def _members(members: Mapping[int, tuple[int, ...]], key: int) -> list[Jurisdiction]:
    return [Jurisdiction._from_index(index) for index in members.get(key, ())]


def in_region(region: Region) -> list[Jurisdiction]:
    """All jurisdictions zoned to the region, in canonical order."""
    return _members(get_tables().region_members, int(region))


def in_sub_region(sub_region: SubRegion) -> list[Jurisdiction]:
    return _members(get_tables().sub_region_members, int(sub_region))


def in_intermediate_region(intermediate_region: IntermediateRegion) -> list[Jurisdiction]:
    return _members(get_tables().intermediate_region_members, int(intermediate_region))
