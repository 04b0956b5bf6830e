import importlib.util
import json
import os

import httpx
import pytest

from jurisdiction.compiler import source as source_module
from jurisdiction.compiler.cli import main
from jurisdiction.compiler.codegen import render_modules
from jurisdiction.compiler.indexing import assign_indices, load_previous
from jurisdiction.compiler.pipeline import GENERATED_DIR, build, compile_source
from jurisdiction.compiler.source import fetch_source, parse_source, read_source
from jurisdiction.compiler.validation import enum_identifier
from jurisdiction.config import settings
from jurisdiction.errors import DataIntegrityError
from jurisdiction.generated import definitions

NORWAY = {
    "name": "Norway", "alpha-2": "NO", "alpha-3": "NOR", "country-code": "578",
    "region": "Europe", "sub-region": "Northern Europe", "intermediate-region": "",
    "region-code": "150", "sub-region-code": "154", "intermediate-region-code": "",
}
SWEDEN = {
    "name": "Sweden", "alpha-2": "SE", "alpha-3": "SWE", "country-code": "752",
    "region": "Europe", "sub-region": "Northern Europe", "intermediate-region": "",
    "region-code": "150", "sub-region-code": "154", "intermediate-region-code": "",
}
JERSEY = {
    "name": "Jersey", "alpha-2": "JE", "alpha-3": "JEY", "country-code": "832",
    "region": "Europe", "sub-region": "Northern Europe", "intermediate-region": "Channel Islands",
    "region-code": "150", "sub-region-code": "154", "intermediate-region-code": "830",
}
ANGOLA = {
    "name": "Angola", "alpha-2": "AO", "alpha-3": "AGO", "country-code": "024",
    "region": "Africa", "sub-region": "Sub-Saharan Africa", "intermediate-region": "Middle Africa",
    "region-code": "002", "sub-region-code": "202", "intermediate-region-code": "017",
}
ANTARCTICA = {
    "name": "Antarctica", "alpha-2": "AQ", "alpha-3": "ATA", "country-code": "010",
    "region": "", "sub-region": "", "intermediate-region": "",
    "region-code": "", "sub-region-code": "", "intermediate-region-code": "",
}


def _raw(*rows) -> bytes:
    return json.dumps(list(rows)).encode()


def _document(*rows):
    return parse_source(_raw(*rows), "test")


def _rejected(*rows) -> DataIntegrityError:
    with pytest.raises(DataIntegrityError) as excinfo:
        compile_source(_document(*rows))
    return excinfo.value


def _load_module(path: str):
    spec = importlib.util.spec_from_file_location(f"_generated_{os.path.basename(path)[:-3]}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_compile_small_source():
    compiled = compile_source(_document(NORWAY, ANGOLA, ANTARCTICA, JERSEY))
    assert [c.alpha2 for c in compiled.countries] == ["NO", "AO", "AQ", "JE"]
    assert [c.index for c in compiled.countries] == [0, 1, 2, 3]
    assert compiled.countries[1].numeric == 24
    assert compiled.countries[1].intermediate_region_id == 17
    assert compiled.countries[2].region_id is None
    assert [r.id for r in compiled.regions] == [2, 150]
    assert [(s.id, s.region_id) for s in compiled.sub_regions] == [(154, 150), (202, 2)]
    assert [(i.id, i.sub_region_id) for i in compiled.intermediate_regions] == [(17, 202), (830, 154)]
    assert compiled.retired == {}


def test_snake_case_fields_and_integer_codes():
    row = {
        "name": "Norway", "alpha2": "NO", "alpha3": "NOR", "numeric_code": 578,
        "region": "Europe", "region_code": 150, "sub_region": "Northern Europe", "sub_region_code": 154,
        "intermediate_region": None, "intermediate_region_code": None,
    }
    compiled = compile_source(_document(row))
    assert compiled.countries[0].numeric == 578
    assert compiled.countries[0].sub_region_id == 154
    assert compiled.countries[0].intermediate_region_id is None


def test_without_regions():
    compiled = compile_source(_document(NORWAY, ANGOLA), include_regions=False)
    assert compiled.regions == ()
    assert compiled.sub_regions == ()
    assert all(c.region_id is None for c in compiled.countries)


def test_rejects_unreadable_source():
    for raw in [b"not json", b'{"NO": "Norway"}', _raw({"name": "Norway"})]:
        with pytest.raises(DataIntegrityError) as excinfo:
            parse_source(raw, "test")
        assert excinfo.value.rule == "source"


def test_rejects_bad_alpha2():
    for code in ["no", "N0", "NOR", ""]:
        assert _rejected({**NORWAY, "alpha-2": code}).rule == "alpha2"
    assert _rejected(NORWAY, {**SWEDEN, "alpha-2": "NO"}).rule == "alpha2"


def test_rejects_bad_alpha3():
    assert _rejected({**NORWAY, "alpha-3": "No"}).rule == "alpha3"
    assert _rejected(NORWAY, {**SWEDEN, "alpha-3": "NOR"}).rule == "alpha3"


def test_rejects_bad_numeric():
    for code in ["1000", "57a", "", "-1"]:
        assert _rejected({**NORWAY, "country-code": code}).rule == "numeric"
    assert _rejected(NORWAY, {**SWEDEN, "country-code": "0578"}).rule == "numeric"
    assert _rejected(NORWAY, {**SWEDEN, "country-code": "578"}).rule == "numeric"


def test_rejects_inconsistent_regions():
    # sub-region 154 placed under Africa
    misplaced = {**SWEDEN, "region": "Africa", "region-code": "002"}
    assert _rejected(NORWAY, misplaced).rule == "region"
    # same id, different names
    renamed = {**SWEDEN, "region": "Europa"}
    assert _rejected(NORWAY, renamed).rule == "region"
    # name without code
    assert _rejected({**NORWAY, "region-code": ""}).rule == "region"
    # sub-region without region
    orphan = {**NORWAY, "region": "", "region-code": ""}
    assert _rejected(orphan).rule == "region"


def test_rejects_region_names_without_identifier():
    unnamed = {**NORWAY, "sub-region": "***"}
    assert _rejected(unnamed).rule == "region"


def test_rules_run_in_order():
    # alpha-3 and numeric both duplicated: alpha-3 reported first
    clash = {**SWEDEN, "alpha-3": "NOR", "country-code": "578"}
    error = _rejected(NORWAY, clash)
    assert error.rule == "alpha3"
    # numeric duplicated and regions inconsistent: numeric reported first
    clash = {**SWEDEN, "country-code": "578", "region": "Africa", "region-code": "002"}
    assert _rejected(NORWAY, clash).rule == "numeric"


def test_error_carries_offending_value():
    error = _rejected(NORWAY, {**SWEDEN, "alpha-2": "NO"})
    assert error.value == "NO"
    assert str(error).startswith("[alpha2] ")


def test_rejects_conflicting_previous_indices():
    with pytest.raises(DataIntegrityError) as excinfo:
        compile_source(_document(NORWAY, SWEDEN), previous={"NO": 0, "SE": 0})
    assert excinfo.value.rule == "index"


def test_index_assignment_is_stable():
    indices, retired = assign_indices(["NO", "SE", "AO"])
    assert indices == {"NO": 0, "SE": 1, "AO": 2}
    assert retired == {}

    # reordered, SE dropped, JE added
    indices, retired = assign_indices(["AO", "JE", "NO"], previous=indices, retired=retired)
    assert indices == {"AO": 2, "JE": 3, "NO": 0}
    assert retired == {"SE": 1}

    # SE comes back with its old index
    indices, retired = assign_indices(["SE", "AO", "JE", "NO"], previous=indices, retired=retired)
    assert indices == {"SE": 1, "AO": 2, "JE": 3, "NO": 0}
    assert retired == {}


def test_retired_index_is_never_reused():
    indices, retired = assign_indices(["AO", "JE"], previous={"NO": 0, "SE": 1, "AO": 2})
    assert indices == {"AO": 2, "JE": 3}
    assert retired == {"NO": 0, "SE": 1}


def test_build_writes_importable_modules(tmp_path):
    output_dir = str(tmp_path)
    compiled = build(_document(NORWAY, ANGOLA, ANTARCTICA, JERSEY), output_dir=output_dir)
    assert sorted(os.listdir(output_dir)) == ["alpha.py", "definitions.py", "regions.py"]

    generated = _load_module(os.path.join(output_dir, "definitions.py"))
    assert generated.COUNTRIES == compiled.countries
    assert generated.SOURCE_SHA256 == compiled.source_sha256

    alpha = _load_module(os.path.join(output_dir, "alpha.py"))
    assert [member.value for member in alpha.Alpha2] == ["NO", "AO", "AQ", "JE"]
    assert alpha.Alpha3.AGO == "AGO"

    regions = _load_module(os.path.join(output_dir, "regions.py"))
    assert regions.SubRegion.SUB_SAHARAN_AFRICA.region() == regions.Region.AFRICA
    assert regions.IntermediateRegion.CHANNEL_ISLANDS.label == "Channel Islands"


def test_rebuild_keeps_indices(tmp_path):
    output_dir = str(tmp_path)
    build(_document(NORWAY, SWEDEN, ANGOLA), output_dir=output_dir)
    compiled = build(_document(ANGOLA, JERSEY, NORWAY), output_dir=output_dir)
    assert {c.alpha2: c.index for c in compiled.countries} == {"NO": 0, "AO": 2, "JE": 3}
    assert compiled.retired == {"SE": 1}

    previous, retired = load_previous(output_dir)
    assert previous == {"NO": 0, "AO": 2, "JE": 3}
    assert retired == {"SE": 1}

    compiled = build(_document(ANGOLA, JERSEY, NORWAY), output_dir=output_dir, fresh=True)
    assert [c.index for c in compiled.countries] == [0, 1, 2]


def test_rejected_source_writes_nothing(tmp_path):
    with pytest.raises(DataIntegrityError):
        build(_document(NORWAY, {**SWEDEN, "alpha-2": "NO"}), output_dir=str(tmp_path))
    assert os.listdir(tmp_path) == []


def test_rejected_source_keeps_previous_output(tmp_path):
    output_dir = str(tmp_path)
    build(_document(NORWAY, SWEDEN), output_dir=output_dir)
    before = {path.name: path.read_text() for path in tmp_path.glob("*.py")}

    with pytest.raises(DataIntegrityError):
        build(_document(NORWAY, {**SWEDEN, "country-code": "578"}), output_dir=output_dir)
    after = {path.name: path.read_text() for path in tmp_path.glob("*.py")}
    assert after == before


def test_check_only_writes_nothing(tmp_path):
    compiled = build(_document(NORWAY), output_dir=str(tmp_path), write=False)
    assert len(compiled.countries) == 1
    assert os.listdir(tmp_path) == []


def test_load_previous_without_output(tmp_path):
    assert load_previous(str(tmp_path)) == ({}, {})


def test_load_previous_rejects_broken_output(tmp_path):
    (tmp_path / "definitions.py").write_text("COUNTRIES = (\n")
    with pytest.raises(DataIntegrityError) as excinfo:
        load_previous(str(tmp_path))
    assert excinfo.value.rule == "index"


def test_generated_modules_match_bundled_source():
    previous, retired = load_previous(GENERATED_DIR)
    compiled = compile_source(read_source(settings.DATA_SOURCE_PATH), previous, retired)
    assert compiled.countries == definitions.COUNTRIES
    assert compiled.regions == definitions.REGIONS
    assert compiled.sub_regions == definitions.SUB_REGIONS
    assert compiled.intermediate_regions == definitions.INTERMEDIATE_REGIONS
    assert compiled.source_sha256 == definitions.SOURCE_SHA256

    for filename, rendered in render_modules(compiled).items():
        with open(os.path.join(GENERATED_DIR, filename), encoding="utf-8") as handle:
            assert handle.read() == rendered, filename


def test_enum_identifier():
    assert enum_identifier("Sub-Saharan Africa") == "SUB_SAHARAN_AFRICA"
    assert enum_identifier("South-eastern Asia") == "SOUTH_EASTERN_ASIA"
    assert enum_identifier("Latin America and the Caribbean") == "LATIN_AMERICA_AND_THE_CARIBBEAN"


def test_fetch_source(monkeypatch):
    def fake_get(url, **kwargs):
        return httpx.Response(200, content=_raw(NORWAY), request=httpx.Request("GET", url))

    monkeypatch.setattr(source_module.httpx, "get", fake_get)
    document = fetch_source("https://example.invalid/all.json", timeout=1.0)
    assert document.origin == "https://example.invalid/all.json"
    assert document.countries[0].alpha2 == "NO"


def test_fetch_source_http_error(monkeypatch):
    def fake_get(url, **kwargs):
        return httpx.Response(404, request=httpx.Request("GET", url))

    monkeypatch.setattr(source_module.httpx, "get", fake_get)
    with pytest.raises(httpx.HTTPStatusError):
        fetch_source("https://example.invalid/all.json", timeout=1.0)


def test_cli_builds_tables(tmp_path):
    source = tmp_path / "source.json"
    source.write_bytes(_raw(NORWAY, ANGOLA))
    output_dir = tmp_path / "generated"
    assert main(["--source", str(source), "--output-dir", str(output_dir)]) == 0
    assert sorted(os.listdir(output_dir)) == ["alpha.py", "definitions.py", "regions.py"]


def test_cli_without_regions(tmp_path):
    source = tmp_path / "source.json"
    source.write_bytes(_raw(NORWAY, ANGOLA))
    output_dir = tmp_path / "generated"
    assert main(["--source", str(source), "--output-dir", str(output_dir), "--no-regions"]) == 0
    generated = _load_module(str(output_dir / "definitions.py"))
    assert generated.REGIONS == ()
    assert generated.COUNTRIES[0].region_id is None


def test_cli_check_only(tmp_path):
    source = tmp_path / "source.json"
    source.write_bytes(_raw(NORWAY))
    output_dir = tmp_path / "generated"
    assert main(["--source", str(source), "--output-dir", str(output_dir), "--check"]) == 0
    assert not output_dir.exists()


def test_cli_rejects_bad_source(tmp_path):
    source = tmp_path / "source.json"
    source.write_bytes(_raw(NORWAY, {**SWEDEN, "alpha-2": "NO"}))
    output_dir = tmp_path / "generated"
    assert main(["--source", str(source), "--output-dir", str(output_dir)]) == 1
    assert not output_dir.exists()


def test_cli_missing_source(tmp_path):
    assert main(["--source", str(tmp_path / "missing.json"), "--output-dir", str(tmp_path)]) == 1


def test_cli_fetches_from_url(tmp_path, monkeypatch):
    def fake_get(url, **kwargs):
        assert url == settings.UPSTREAM_DATA_URL
        return httpx.Response(200, content=_raw(NORWAY), request=httpx.Request("GET", url))

    monkeypatch.setattr(source_module.httpx, "get", fake_get)
    assert main(["--url", "--output-dir", str(tmp_path), "--check"]) == 0
