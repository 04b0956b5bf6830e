"""Loading the raw country/region source.

The source is a JSON array with one object per country, using the field
names of the upstream ISO 3166 / UN M49 merge ("alpha-2", "country-code",
"sub-region-code", ...). Snake case names are accepted as well. Empty
strings mean "not classified".
"""

import hashlib
import json
import logging
from dataclasses import dataclass

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from jurisdiction.errors import DataIntegrityError

logger = logging.getLogger(__name__)


class SourceCountry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    alpha2: str = Field(validation_alias=AliasChoices("alpha-2", "alpha2"))
    alpha3: str = Field(validation_alias=AliasChoices("alpha-3", "alpha3"))
    numeric_code: str = Field(validation_alias=AliasChoices("country-code", "numeric_code"))
    region: str = ""
    region_code: str = Field("", validation_alias=AliasChoices("region-code", "region_code"))
    sub_region: str = Field("", validation_alias=AliasChoices("sub-region", "sub_region"))
    sub_region_code: str = Field("", validation_alias=AliasChoices("sub-region-code", "sub_region_code"))
    intermediate_region: str = Field(
        "", validation_alias=AliasChoices("intermediate-region", "intermediate_region")
    )
    intermediate_region_code: str = Field(
        "", validation_alias=AliasChoices("intermediate-region-code", "intermediate_region_code")
    )

    @field_validator(
        "numeric_code", "region_code", "sub_region_code", "intermediate_region_code", mode="before"
    )
    @classmethod
    def _code_as_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value:03d}"
        return value

    @field_validator("region", "sub_region", "intermediate_region", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


@dataclass(frozen=True)
class SourceDocument:
    origin: str
    sha256: str
    countries: list[SourceCountry]


def parse_source(raw: bytes, origin: str) -> SourceDocument:
    """Parse raw JSON bytes into validated source records."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DataIntegrityError("source", f"{origin} is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise DataIntegrityError("source", f"{origin} must contain a JSON array of country objects")

    countries: list[SourceCountry] = []
    for position, item in enumerate(payload):
        try:
            countries.append(SourceCountry.model_validate(item))
        except ValidationError as exc:
            raise DataIntegrityError(
                "source", f"record #{position} in {origin} is malformed: {exc}", item
            ) from exc

    return SourceDocument(
        origin=origin,
        sha256=hashlib.sha256(raw).hexdigest(),
        countries=countries,
    )


def read_source(path: str) -> SourceDocument:
    with open(path, "rb") as handle:
        raw = handle.read()
    logger.info("Read %d bytes of source data from %s", len(raw), path)
    return parse_source(raw, path)


def fetch_source(url: str, timeout: float) -> SourceDocument:
    """Download the source from an upstream URL."""
    response = httpx.get(url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()
    logger.info("Fetched %d bytes of source data from %s", len(response.content), url)
    return parse_source(response.content, url)
