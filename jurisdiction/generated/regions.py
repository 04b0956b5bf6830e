"""UN M49 region enumerations generated by ``jurisdiction-compile``.

Do not edit by hand; regenerate from the source data instead.
"""

from enum import IntEnum


class Region(IntEnum):
    """UN M49 region, valued by its numeric code."""

    AFRICA = 2
    OCEANIA = 9
    AMERICAS = 19
    ASIA = 142
    EUROPE = 150

    @property
    def label(self) -> str:
        return _REGION_LABELS[self.value]


class SubRegion(IntEnum):
    """UN M49 sub-region, valued by its numeric code."""

    NORTHERN_AFRICA = 15
    NORTHERN_AMERICA = 21
    EASTERN_ASIA = 30
    SOUTHERN_ASIA = 34
    SOUTH_EASTERN_ASIA = 35
    SOUTHERN_EUROPE = 39
    AUSTRALIA_AND_NEW_ZEALAND = 53
    MELANESIA = 54
    MICRONESIA = 57
    POLYNESIA = 61
    CENTRAL_ASIA = 143
    WESTERN_ASIA = 145
    EASTERN_EUROPE = 151
    NORTHERN_EUROPE = 154
    WESTERN_EUROPE = 155
    SUB_SAHARAN_AFRICA = 202
    LATIN_AMERICA_AND_THE_CARIBBEAN = 419

    @property
    def label(self) -> str:
        return _SUB_REGION_LABELS[self.value]

    def region(self) -> Region:
        return Region(_SUB_REGION_PARENTS[self.value])


class IntermediateRegion(IntEnum):
    """UN M49 intermediate region, valued by its numeric code."""

    SOUTH_AMERICA = 5
    WESTERN_AFRICA = 11
    CENTRAL_AMERICA = 13
    EASTERN_AFRICA = 14
    MIDDLE_AFRICA = 17
    SOUTHERN_AFRICA = 18
    CARIBBEAN = 29
    CHANNEL_ISLANDS = 830

    @property
    def label(self) -> str:
        return _INTERMEDIATE_REGION_LABELS[self.value]

    def sub_region(self) -> SubRegion:
        return SubRegion(_INTERMEDIATE_REGION_PARENTS[self.value])


_REGION_LABELS: dict[int, str] = {
    2: "Africa",
    9: "Oceania",
    19: "Americas",
    142: "Asia",
    150: "Europe",
}

_SUB_REGION_LABELS: dict[int, str] = {
    15: "Northern Africa",
    21: "Northern America",
    30: "Eastern Asia",
    34: "Southern Asia",
    35: "South-eastern Asia",
    39: "Southern Europe",
    53: "Australia and New Zealand",
    54: "Melanesia",
    57: "Micronesia",
    61: "Polynesia",
    143: "Central Asia",
    145: "Western Asia",
    151: "Eastern Europe",
    154: "Northern Europe",
    155: "Western Europe",
    202: "Sub-Saharan Africa",
    419: "Latin America and the Caribbean",
}

_SUB_REGION_PARENTS: dict[int, int] = {
    15: 2,
    21: 19,
    30: 142,
    34: 142,
    35: 142,
    39: 150,
    53: 9,
    54: 9,
    57: 9,
    61: 9,
    143: 142,
    145: 142,
    151: 150,
    154: 150,
    155: 150,
    202: 2,
    419: 19,
}

_INTERMEDIATE_REGION_LABELS: dict[int, str] = {
    5: "South America",
    11: "Western Africa",
    13: "Central America",
    14: "Eastern Africa",
    17: "Middle Africa",
    18: "Southern Africa",
    29: "Caribbean",
    830: "Channel Islands",
}

_INTERMEDIATE_REGION_PARENTS: dict[int, int] = {
    5: 419,
    11: 202,
    13: 419,
    14: 202,
    17: 202,
    18: 202,
    29: 419,
    830: 154,
}
