"""Data compiler pipeline: source -> validated tables -> generated modules.

Steps:
1. Check alpha-2, alpha-3 and numeric codes
2. Derive the region hierarchy from the source rows
3. Assign canonical indices (stable against previous output)
4. Check region references, then canonical indices
5. Render every module, then write them all
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from jurisdiction.compiler.codegen import render_modules, write_modules
from jurisdiction.compiler.indexing import assign_indices, load_previous
from jurisdiction.compiler.source import SourceDocument
from jurisdiction.compiler.validation import (
    Classification,
    RegionTables,
    check_alpha2,
    check_alpha3,
    check_indices,
    check_numeric,
    check_region_references,
    collect_regions,
)
from jurisdiction.records import (
    CountryRecord,
    IntermediateRegionRecord,
    RegionRecord,
    SubRegionRecord,
)

logger = logging.getLogger(__name__)

GENERATED_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "generated")

_UNCLASSIFIED = Classification()


@dataclass(frozen=True)
class CompiledTables:
    countries: tuple[CountryRecord, ...]
    regions: tuple[RegionRecord, ...] = ()
    sub_regions: tuple[SubRegionRecord, ...] = ()
    intermediate_regions: tuple[IntermediateRegionRecord, ...] = ()
    retired: dict[str, int] = field(default_factory=dict)
    source_sha256: str = ""


def compile_source(
    document: SourceDocument,
    previous: Mapping[str, int] | None = None,
    retired: Mapping[str, int] | None = None,
    include_regions: bool = True,
) -> CompiledTables:
    """Validate the source and build the tables. Raises DataIntegrityError."""
    sources = document.countries

    check_alpha2([c.alpha2 for c in sources])
    check_alpha3([c.alpha3 for c in sources])
    numerics = check_numeric([c.numeric_code for c in sources])

    if include_regions:
        region_tables, classifications = collect_regions(sources)
    else:
        region_tables, classifications = RegionTables(), {}

    indices, still_retired = assign_indices([c.alpha2 for c in sources], previous, retired)

    records = []
    for source, numeric in zip(sources, numerics):
        classification = classifications.get(source.alpha2, _UNCLASSIFIED)
        records.append(
            CountryRecord(
                index=indices[source.alpha2],
                alpha2=source.alpha2,
                alpha3=source.alpha3,
                numeric=numeric,
                name=source.name,
                region_id=classification.region_id,
                sub_region_id=classification.sub_region_id,
                intermediate_region_id=classification.intermediate_region_id,
            )
        )
    records.sort(key=lambda record: record.index)

    check_region_references(records, region_tables)
    check_indices(records, still_retired)

    compiled = CompiledTables(
        countries=tuple(records),
        regions=region_tables.regions,
        sub_regions=region_tables.sub_regions,
        intermediate_regions=region_tables.intermediate_regions,
        retired=still_retired,
        source_sha256=document.sha256,
    )
    logger.info(
        "Compiled %d countries, %d regions, %d sub-regions, %d intermediate regions from %s",
        len(compiled.countries),
        len(compiled.regions),
        len(compiled.sub_regions),
        len(compiled.intermediate_regions),
        document.origin,
    )
    return compiled


def build(
    document: SourceDocument,
    output_dir: str = GENERATED_DIR,
    include_regions: bool = True,
    fresh: bool = False,
    write: bool = True,
) -> CompiledTables:
    """Compile the source and (unless write is False) regenerate output_dir."""
    previous, retired = ({}, {}) if fresh else load_previous(output_dir)
    compiled = compile_source(document, previous, retired, include_regions)
    modules = render_modules(compiled)
    if write:
        write_modules(output_dir, modules)
    else:
        logger.info("Check only, nothing written to %s", output_dir)
    return compiled
