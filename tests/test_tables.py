from concurrent.futures import ThreadPoolExecutor

import pytest

from jurisdiction.errors import DataIntegrityError
from jurisdiction.generated import definitions
from jurisdiction.records import CountryRecord, RegionRecord, SubRegionRecord
from jurisdiction.tables import LookupTables, get_tables, reset_tables

EUROPE = RegionRecord(150, "Europe")
AFRICA = RegionRecord(2, "Africa")
NORTHERN_EUROPE = SubRegionRecord(154, "Northern Europe", 150)
NORWAY = CountryRecord(0, "NO", "NOR", 578, "Norway", 150, 154)
SWEDEN = CountryRecord(1, "SE", "SWE", 752, "Sweden", 150, 154)


def _rejected(*args, **kwargs) -> DataIntegrityError:
    with pytest.raises(DataIntegrityError) as excinfo:
        LookupTables.build(*args, **kwargs)
    return excinfo.value


def test_concurrent_first_access_builds_once():
    reset_tables()
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: get_tables(), range(64)))
    assert all(tables is results[0] for tables in results)
    assert get_tables() is results[0]


def test_reset_rebuilds():
    first = get_tables()
    reset_tables()
    second = get_tables()
    assert first is not second
    assert second.by_alpha2 == first.by_alpha2


def test_bundled_tables():
    tables = get_tables()
    assert len(tables.countries) == len(definitions.COUNTRIES)
    assert tables.by_alpha3["NOR"] == tables.by_alpha2["NO"] == tables.by_numeric[578]
    assert tables.countries[tables.by_alpha2["NO"]].name == "Norway"


def test_tables_are_read_only():
    tables = get_tables()
    with pytest.raises(TypeError):
        tables.by_alpha2["XX"] = 0
    with pytest.raises(AttributeError):
        tables.regions_enabled = False


def test_build_small_tables():
    tables = LookupTables.build([NORWAY, SWEDEN], [EUROPE], [NORTHERN_EUROPE])
    assert tables.ordered == (0, 1)
    assert tables.region_members[150] == (0, 1)
    assert tables.sub_region_members[154] == (0, 1)
    assert dict(tables.intermediate_region_members) == {}


def test_build_without_regions():
    tables = LookupTables.build([NORWAY, SWEDEN], [EUROPE], [NORTHERN_EUROPE], regions_enabled=False)
    assert not tables.regions_enabled
    assert dict(tables.regions) == {}
    assert dict(tables.region_members) == {}
    assert tables.by_alpha2["SE"] == 1


def test_build_rejects_hand_edited_records():
    duplicate = CountryRecord(1, "NO", "SWE", 752, "Sweden", 150, 154)
    assert _rejected([NORWAY, duplicate], [EUROPE], [NORTHERN_EUROPE]).rule == "alpha2"

    shared_index = CountryRecord(0, "SE", "SWE", 752, "Sweden", 150, 154)
    assert _rejected([NORWAY, shared_index], [EUROPE], [NORTHERN_EUROPE]).rule == "index"

    wrong_region = CountryRecord(1, "SE", "SWE", 752, "Sweden", 2, 154)
    assert _rejected([NORWAY, wrong_region], [EUROPE, AFRICA], [NORTHERN_EUROPE]).rule == "region"

    unknown_region = CountryRecord(1, "SE", "SWE", 752, "Sweden", 19, None)
    assert _rejected([NORWAY, unknown_region], [EUROPE], [NORTHERN_EUROPE]).rule == "region"


def test_build_rejects_reused_retired_index():
    error = _rejected([NORWAY, SWEDEN], [EUROPE], [NORTHERN_EUROPE], retired={"AN": 1})
    assert error.rule == "index"
    error = _rejected([NORWAY, SWEDEN], [EUROPE], [NORTHERN_EUROPE], retired={"SE": 7})
    assert error.rule == "index"
