"""Render compiled tables as Python modules and write them out.

All modules are rendered in memory first; files are only touched once every
module rendered, each through a temporary file and ``os.replace``.
"""

import json
import logging
import os
import tempfile

from jurisdiction.compiler.validation import enum_identifier

logger = logging.getLogger(__name__)

_HEADER = '''"""{title} generated by ``jurisdiction-compile``.

Do not edit by hand; regenerate from the source data instead.
"""
'''


def _text(value: str) -> str:
    # JSON string literals are valid Python string literals
    return json.dumps(value, ensure_ascii=False)


def _optional(value: int | None) -> str:
    return "None" if value is None else str(value)


def _tuple(annotation: str, rows: list[str]) -> str:
    body = "".join(f"    {row},\n" for row in rows)
    return f"{annotation} = (\n{body})\n"


def _dict(annotation: str, items: list[tuple[str, str]]) -> str:
    if not items:
        return f"{annotation} = {{}}\n"
    body = "".join(f"    {key}: {value},\n" for key, value in items)
    return f"{annotation} = {{\n{body}}}\n"


def render_definitions(compiled) -> str:
    regions = [f"RegionRecord({r.id}, {_text(r.name)})" for r in compiled.regions]
    subs = [f"SubRegionRecord({s.id}, {_text(s.name)}, {s.region_id})" for s in compiled.sub_regions]
    intermediates = [
        f"IntermediateRegionRecord({i.id}, {_text(i.name)}, {i.sub_region_id})"
        for i in compiled.intermediate_regions
    ]
    countries = [
        f"CountryRecord({c.index}, {_text(c.alpha2)}, {_text(c.alpha3)}, {c.numeric}, {_text(c.name)}, "
        f"{_optional(c.region_id)}, {_optional(c.sub_region_id)}, {_optional(c.intermediate_region_id)})"
        for c in compiled.countries
    ]
    retired = [(_text(code), str(index)) for code, index in compiled.retired.items()]

    return "\n".join([
        _HEADER.format(title="Country and region tables"),
        "from jurisdiction.records import (\n"
        "    CountryRecord,\n"
        "    IntermediateRegionRecord,\n"
        "    RegionRecord,\n"
        "    SubRegionRecord,\n"
        ")\n",
        f"SOURCE_SHA256 = {_text(compiled.source_sha256)}\n",
        _tuple("REGIONS: tuple[RegionRecord, ...]", regions),
        _tuple("SUB_REGIONS: tuple[SubRegionRecord, ...]", subs),
        _tuple("INTERMEDIATE_REGIONS: tuple[IntermediateRegionRecord, ...]", intermediates),
        "# index, alpha-2, alpha-3, numeric, name, region, sub-region, intermediate region\n"
        + _tuple("COUNTRIES: tuple[CountryRecord, ...]", countries),
        "# alpha-2 -> canonical index of codes no longer in the source\n"
        + _dict("RETIRED: dict[str, int]", retired),
    ])


def _enum(name: str, base: str, doc: str, members: list[tuple[str, str]], methods: str = "") -> str:
    lines = [f"class {name}({base}):\n", f'    """{doc}"""\n']
    if members:
        lines.append("\n")
        lines.extend(f"    {member} = {value}\n" for member, value in members)
    if methods:
        lines.append("\n")
        lines.append(methods)
    return "".join(lines)


def render_alpha(compiled) -> str:
    alpha2 = [(c.alpha2, _text(c.alpha2)) for c in compiled.countries]
    alpha3 = [(c.alpha3, _text(c.alpha3)) for c in compiled.countries]
    return "\n".join([
        _HEADER.format(title="ISO 3166-1 code enumerations"),
        "from enum import StrEnum\n",
        "",
        _enum("Alpha2", "StrEnum", "Two letter ISO 3166-1 country code.", alpha2),
        "",
        _enum("Alpha3", "StrEnum", "Three letter ISO 3166-1 country code.", alpha3),
    ])


_REGION_METHODS = '''    @property
    def label(self) -> str:
        return _REGION_LABELS[self.value]
'''

_SUB_REGION_METHODS = '''    @property
    def label(self) -> str:
        return _SUB_REGION_LABELS[self.value]

    def region(self) -> Region:
        return Region(_SUB_REGION_PARENTS[self.value])
'''

_INTERMEDIATE_REGION_METHODS = '''    @property
    def label(self) -> str:
        return _INTERMEDIATE_REGION_LABELS[self.value]

    def sub_region(self) -> SubRegion:
        return SubRegion(_INTERMEDIATE_REGION_PARENTS[self.value])
'''


def render_regions(compiled) -> str:
    def members(records):
        return [(enum_identifier(r.name), str(r.id)) for r in records]

    return "\n".join([
        _HEADER.format(title="UN M49 region enumerations"),
        "from enum import IntEnum\n",
        "",
        _enum("Region", "IntEnum", "UN M49 region, valued by its numeric code.",
              members(compiled.regions), _REGION_METHODS),
        "",
        _enum("SubRegion", "IntEnum", "UN M49 sub-region, valued by its numeric code.",
              members(compiled.sub_regions), _SUB_REGION_METHODS),
        "",
        _enum("IntermediateRegion", "IntEnum", "UN M49 intermediate region, valued by its numeric code.",
              members(compiled.intermediate_regions), _INTERMEDIATE_REGION_METHODS),
        "",
        _dict("_REGION_LABELS: dict[int, str]",
              [(str(r.id), _text(r.name)) for r in compiled.regions]),
        _dict("_SUB_REGION_LABELS: dict[int, str]",
              [(str(s.id), _text(s.name)) for s in compiled.sub_regions]),
        _dict("_SUB_REGION_PARENTS: dict[int, int]",
              [(str(s.id), str(s.region_id)) for s in compiled.sub_regions]),
        _dict("_INTERMEDIATE_REGION_LABELS: dict[int, str]",
              [(str(i.id), _text(i.name)) for i in compiled.intermediate_regions]),
        _dict("_INTERMEDIATE_REGION_PARENTS: dict[int, int]",
              [(str(i.id), str(i.sub_region_id)) for i in compiled.intermediate_regions]),
    ])


def render_modules(compiled) -> dict[str, str]:
    """Return file name -> module source for every generated module."""
    return {
        "definitions.py": render_definitions(compiled),
        "alpha.py": render_alpha(compiled),
        "regions.py": render_regions(compiled),
    }


def write_modules(output_dir: str, modules: dict[str, str]) -> list[str]:
    """Write rendered modules into output_dir, replacing existing files."""
    os.makedirs(output_dir, exist_ok=True)
    staged: list[tuple[str, str]] = []
    try:
        for filename, source in modules.items():
            fd, tmp_path = tempfile.mkstemp(prefix=f".{filename}.", dir=output_dir)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(source)
            staged.append((tmp_path, os.path.join(output_dir, filename)))
    except OSError:
        for tmp_path, _ in staged:
            os.unlink(tmp_path)
        raise

    written = []
    for tmp_path, path in staged:
        os.replace(tmp_path, path)
        written.append(path)
        logger.info("Wrote %s", path)
    return written
