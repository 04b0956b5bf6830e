"""Integrity rules for country and region data.

The compiler runs the rules in a fixed order and stops at the first
violation:

1. alpha2   -- two uppercase ASCII letters, unique
2. alpha3   -- three uppercase ASCII letters, unique
3. numeric  -- 0..999, unique
4. region   -- every region reference resolves and nests consistently
5. index    -- canonical indices unique, never shared with a retired code

The same checks run again when the runtime loads the generated tables.
"""

import keyword
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from jurisdiction.compiler.source import SourceCountry
from jurisdiction.errors import DataIntegrityError
from jurisdiction.records import (
    CountryRecord,
    IntermediateRegionRecord,
    RegionRecord,
    SubRegionRecord,
)

_ALPHA2 = re.compile(r"[A-Z]{2}")
_ALPHA3 = re.compile(r"[A-Z]{3}")
_NUMERIC = re.compile(r"[0-9]{1,3}")
_NON_WORD = re.compile(r"[^0-9A-Za-z]+")


@dataclass(frozen=True)
class RegionTables:
    regions: tuple[RegionRecord, ...] = ()
    sub_regions: tuple[SubRegionRecord, ...] = ()
    intermediate_regions: tuple[IntermediateRegionRecord, ...] = ()


@dataclass(frozen=True)
class Classification:
    region_id: int | None = None
    sub_region_id: int | None = None
    intermediate_region_id: int | None = None


def _check_codes(codes: Iterable[str], pattern: re.Pattern, rule: str, label: str) -> None:
    seen: set[str] = set()
    for code in codes:
        if not isinstance(code, str) or not pattern.fullmatch(code):
            raise DataIntegrityError(rule, f"malformed {label} code {code!r}", code)
        if code in seen:
            raise DataIntegrityError(rule, f"duplicate {label} code {code!r}", code)
        seen.add(code)


def check_alpha2(codes: Iterable[str]) -> None:
    _check_codes(codes, _ALPHA2, "alpha2", "alpha-2")


def check_alpha3(codes: Iterable[str]) -> None:
    _check_codes(codes, _ALPHA3, "alpha3", "alpha-3")


def check_numeric(codes: Iterable[str | int]) -> list[int]:
    """Check numeric country codes and return them as integers."""
    numbers: list[int] = []
    seen: set[int] = set()
    for code in codes:
        if isinstance(code, str) and _NUMERIC.fullmatch(code):
            number = int(code)
        elif isinstance(code, int) and not isinstance(code, bool):
            number = code
        else:
            raise DataIntegrityError("numeric", f"malformed numeric country code {code!r}", code)
        if not 0 <= number <= 999:
            raise DataIntegrityError("numeric", f"numeric country code {number} is out of range 0-999", code)
        if number in seen:
            raise DataIntegrityError("numeric", f"duplicate numeric country code {number:03d}", code)
        seen.add(number)
        numbers.append(number)
    return numbers


def enum_identifier(label: str) -> str:
    """Derive an enum member name from a display name ("Sub-Saharan Africa" -> SUB_SAHARAN_AFRICA)."""
    return _NON_WORD.sub("_", label).strip("_").upper()


def _level(country: SourceCountry, level: str, name: str, code: str) -> int | None:
    if not name and not code:
        return None
    if not name or not code:
        raise DataIntegrityError(
            "region",
            f"{country.alpha2}: {level} needs both a name and a code (got {name!r}, {code!r})",
            country.alpha2,
        )
    if not _NUMERIC.fullmatch(code):
        raise DataIntegrityError("region", f"{country.alpha2}: malformed {level} code {code!r}", code)
    return int(code)


def _claim(names: dict[int, str], level: str, id_: int, name: str) -> None:
    known = names.setdefault(id_, name)
    if known != name:
        raise DataIntegrityError(
            "region", f"{level} {id_:03d} is named both {known!r} and {name!r}", id_
        )


def _nest(parents: dict[int, int], level: str, id_: int, parent: int) -> None:
    known = parents.setdefault(id_, parent)
    if known != parent:
        raise DataIntegrityError(
            "region", f"{level} {id_:03d} is placed under both {known:03d} and {parent:03d}", id_
        )


def collect_regions(
    countries: Sequence[SourceCountry],
) -> tuple[RegionTables, dict[str, Classification]]:
    """Derive the region hierarchy declared by the source rows.

    Returns the region tables plus the classification of each country keyed
    by alpha-2 code.
    """
    region_names: dict[int, str] = {}
    sub_names: dict[int, str] = {}
    intermediate_names: dict[int, str] = {}
    sub_parents: dict[int, int] = {}
    intermediate_parents: dict[int, int] = {}
    classifications: dict[str, Classification] = {}

    for country in countries:
        region = _level(country, "region", country.region, country.region_code)
        sub = _level(country, "sub-region", country.sub_region, country.sub_region_code)
        intermediate = _level(
            country,
            "intermediate region",
            country.intermediate_region,
            country.intermediate_region_code,
        )

        if sub is not None and region is None:
            raise DataIntegrityError(
                "region", f"{country.alpha2}: sub-region {sub:03d} declared without a region", country.alpha2
            )
        if intermediate is not None and sub is None:
            raise DataIntegrityError(
                "region",
                f"{country.alpha2}: intermediate region {intermediate:03d} declared without a sub-region",
                country.alpha2,
            )

        if region is not None:
            _claim(region_names, "region", region, country.region)
        if sub is not None:
            _claim(sub_names, "sub-region", sub, country.sub_region)
            _nest(sub_parents, "sub-region", sub, region)
        if intermediate is not None:
            _claim(intermediate_names, "intermediate region", intermediate, country.intermediate_region)
            _nest(intermediate_parents, "intermediate region", intermediate, sub)

        classifications[country.alpha2] = Classification(region, sub, intermediate)

    tables = RegionTables(
        regions=tuple(RegionRecord(id_, name) for id_, name in sorted(region_names.items())),
        sub_regions=tuple(
            SubRegionRecord(id_, name, sub_parents[id_]) for id_, name in sorted(sub_names.items())
        ),
        intermediate_regions=tuple(
            IntermediateRegionRecord(id_, name, intermediate_parents[id_])
            for id_, name in sorted(intermediate_names.items())
        ),
    )
    return tables, classifications


def _check_identifiers(level: str, labels: Iterable[str]) -> None:
    seen: dict[str, str] = {}
    for label in labels:
        identifier = enum_identifier(label)
        if not identifier.isidentifier() or keyword.iskeyword(identifier):
            raise DataIntegrityError("region", f"{level} name {label!r} does not yield a usable identifier", label)
        if identifier in seen:
            raise DataIntegrityError(
                "region", f"{level} names {seen[identifier]!r} and {label!r} collide as {identifier}", label
            )
        seen[identifier] = label


def _index_by_id(level: str, records: Iterable) -> dict[int, object]:
    by_id: dict[int, object] = {}
    for record in records:
        if record.id in by_id:
            raise DataIntegrityError("region", f"duplicate {level} id {record.id:03d}", record.id)
        by_id[record.id] = record
    return by_id


def check_region_references(countries: Sequence[CountryRecord], tables: RegionTables) -> None:
    """Every region reference resolves and sub-levels nest inside their parents."""
    regions = _index_by_id("region", tables.regions)
    subs = _index_by_id("sub-region", tables.sub_regions)
    intermediates = _index_by_id("intermediate region", tables.intermediate_regions)

    _check_identifiers("region", (r.name for r in tables.regions))
    _check_identifiers("sub-region", (s.name for s in tables.sub_regions))
    _check_identifiers("intermediate region", (i.name for i in tables.intermediate_regions))

    for sub in tables.sub_regions:
        if sub.region_id not in regions:
            raise DataIntegrityError(
                "region", f"sub-region {sub.id:03d} references unknown region {sub.region_id:03d}", sub.id
            )
    for intermediate in tables.intermediate_regions:
        if intermediate.sub_region_id not in subs:
            raise DataIntegrityError(
                "region",
                f"intermediate region {intermediate.id:03d} references unknown sub-region "
                f"{intermediate.sub_region_id:03d}",
                intermediate.id,
            )

    for country in countries:
        if country.region_id is not None and country.region_id not in regions:
            raise DataIntegrityError(
                "region", f"{country.alpha2}: unknown region {country.region_id:03d}", country.alpha2
            )
        if country.sub_region_id is not None:
            sub = subs.get(country.sub_region_id)
            if sub is None:
                raise DataIntegrityError(
                    "region", f"{country.alpha2}: unknown sub-region {country.sub_region_id:03d}", country.alpha2
                )
            if sub.region_id != country.region_id:
                raise DataIntegrityError(
                    "region",
                    f"{country.alpha2}: sub-region {sub.id:03d} belongs to region {sub.region_id:03d}, "
                    f"not {country.region_id}",
                    country.alpha2,
                )
        if country.intermediate_region_id is not None:
            intermediate = intermediates.get(country.intermediate_region_id)
            if intermediate is None:
                raise DataIntegrityError(
                    "region",
                    f"{country.alpha2}: unknown intermediate region {country.intermediate_region_id:03d}",
                    country.alpha2,
                )
            if intermediate.sub_region_id != country.sub_region_id:
                raise DataIntegrityError(
                    "region",
                    f"{country.alpha2}: intermediate region {intermediate.id:03d} belongs to sub-region "
                    f"{intermediate.sub_region_id:03d}, not {country.sub_region_id}",
                    country.alpha2,
                )


def check_indices(countries: Sequence[CountryRecord], retired: Mapping[str, int] | None = None) -> None:
    """Canonical indices are unique and never shared with a retired code."""
    retired = retired or {}
    owners: dict[int, str] = {}
    for code, index in retired.items():
        if index in owners:
            raise DataIntegrityError(
                "index", f"retired codes {owners[index]} and {code} share index {index}", index
            )
        owners[index] = code

    for country in countries:
        index = country.index
        if not isinstance(index, int) or isinstance(index, bool) or index < 0:
            raise DataIntegrityError("index", f"{country.alpha2}: invalid canonical index {index!r}", index)
        if country.alpha2 in retired:
            raise DataIntegrityError(
                "index", f"{country.alpha2} is both active and retired", country.alpha2
            )
        if index in owners:
            raise DataIntegrityError(
                "index", f"canonical index {index} is claimed by both {owners[index]} and {country.alpha2}", index
            )
        owners[index] = country.alpha2
