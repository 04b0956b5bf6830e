from pydantic import BaseModel

from jurisdiction.errors import NoRegionClassification
from jurisdiction.jurisdiction import Jurisdiction


class JurisdictionResponse(BaseModel):
    jurisdiction: Jurisdiction
    alpha2: str
    alpha3: str
    country_code: int
    name: str
    region: str | None = None
    region_code: int | None = None
    sub_region: str | None = None
    sub_region_code: int | None = None
    intermediate_region: str | None = None
    intermediate_region_code: int | None = None

    @classmethod
    def from_jurisdiction(cls, jurisdiction: Jurisdiction) -> "JurisdictionResponse":
        fields: dict = {
            "jurisdiction": jurisdiction,
            "alpha2": jurisdiction.alpha2().value,
            "alpha3": jurisdiction.alpha3().value,
            "country_code": jurisdiction.country_code(),
            "name": jurisdiction.name(),
        }
        for level in ("region", "sub_region", "intermediate_region"):
            try:
                classification = getattr(jurisdiction, level)()
            except NoRegionClassification:
                continue
            fields[level] = classification.label
            fields[f"{level}_code"] = int(classification)
        return cls(**fields)
