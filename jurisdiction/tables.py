"""Process-wide lookup tables.

The tables are built once, on first use, from ``jurisdiction.generated``.
Construction re-runs the integrity checks, so a hand-edited generated module
fails loudly instead of producing wrong answers. After construction nothing
is ever mutated, so readers need no locking.
"""

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from jurisdiction.compiler.validation import (
    RegionTables,
    check_alpha2,
    check_alpha3,
    check_indices,
    check_numeric,
    check_region_references,
)
from jurisdiction.config import settings
from jurisdiction.records import (
    CountryRecord,
    IntermediateRegionRecord,
    RegionRecord,
    SubRegionRecord,
)

logger = logging.getLogger(__name__)


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(mapping)


def _members(countries: tuple[CountryRecord, ...], attr: str) -> Mapping[int, tuple[int, ...]]:
    grouped: dict[int, list[int]] = {}
    for country in countries:
        key = getattr(country, attr)
        if key is not None:
            grouped.setdefault(key, []).append(country.index)
    return _frozen({key: tuple(indices) for key, indices in grouped.items()})


@dataclass(frozen=True)
class LookupTables:
    ordered: tuple[int, ...]  # canonical indices in table order
    countries: Mapping[int, CountryRecord]
    by_alpha2: Mapping[str, int]
    by_alpha3: Mapping[str, int]
    by_numeric: Mapping[int, int]
    regions: Mapping[int, RegionRecord]
    sub_regions: Mapping[int, SubRegionRecord]
    intermediate_regions: Mapping[int, IntermediateRegionRecord]
    region_members: Mapping[int, tuple[int, ...]]
    sub_region_members: Mapping[int, tuple[int, ...]]
    intermediate_region_members: Mapping[int, tuple[int, ...]]
    regions_enabled: bool = True

    @classmethod
    def build(
        cls,
        countries: Iterable[CountryRecord],
        regions: Iterable[RegionRecord] = (),
        sub_regions: Iterable[SubRegionRecord] = (),
        intermediate_regions: Iterable[IntermediateRegionRecord] = (),
        retired: Mapping[str, int] | None = None,
        regions_enabled: bool = True,
    ) -> "LookupTables":
        """Validate the records and index them. Raises DataIntegrityError."""
        countries = tuple(countries)
        region_tables = RegionTables(tuple(regions), tuple(sub_regions), tuple(intermediate_regions))

        check_alpha2([c.alpha2 for c in countries])
        check_alpha3([c.alpha3 for c in countries])
        check_numeric([c.numeric for c in countries])
        check_region_references(countries, region_tables)
        check_indices(countries, retired)

        if not regions_enabled:
            region_tables = RegionTables()
            region_members = sub_region_members = intermediate_region_members = _frozen({})
        else:
            region_members = _members(countries, "region_id")
            sub_region_members = _members(countries, "sub_region_id")
            intermediate_region_members = _members(countries, "intermediate_region_id")

        return cls(
            ordered=tuple(c.index for c in countries),
            countries=_frozen({c.index: c for c in countries}),
            by_alpha2=_frozen({c.alpha2: c.index for c in countries}),
            by_alpha3=_frozen({c.alpha3: c.index for c in countries}),
            by_numeric=_frozen({c.numeric: c.index for c in countries}),
            regions=_frozen({r.id: r for r in region_tables.regions}),
            sub_regions=_frozen({s.id: s for s in region_tables.sub_regions}),
            intermediate_regions=_frozen({i.id: i for i in region_tables.intermediate_regions}),
            region_members=region_members,
            sub_region_members=sub_region_members,
            intermediate_region_members=intermediate_region_members,
            regions_enabled=regions_enabled,
        )


_tables: LookupTables | None = None
_lock = threading.Lock()


def _load() -> LookupTables:
    from jurisdiction.generated import definitions

    tables = LookupTables.build(
        definitions.COUNTRIES,
        definitions.REGIONS,
        definitions.SUB_REGIONS,
        definitions.INTERMEDIATE_REGIONS,
        retired=definitions.RETIRED,
        regions_enabled=settings.ENABLE_REGIONS,
    )
    logger.info(
        "Lookup tables built: %d jurisdictions, %d regions (regions %s)",
        len(tables.countries),
        len(tables.regions),
        "enabled" if tables.regions_enabled else "disabled",
    )
    return tables


def get_tables() -> LookupTables:
    """Return the process-wide tables, building them on first call."""
    global _tables
    if _tables is None:
        with _lock:
            if _tables is None:
                _tables = _load()
    return _tables


def reset_tables() -> None:
    """Drop the built tables so the next call rebuilds them. For tests."""
    global _tables
    with _lock:
        _tables = None
