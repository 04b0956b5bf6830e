"""The lightweight handle used to identify a jurisdiction and reach its metadata."""

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from jurisdiction.errors import UnknownJurisdiction
from jurisdiction.generated.alpha import Alpha2, Alpha3
from jurisdiction.tables import get_tables


class Jurisdiction:
    """An immutable handle for a country or area of the world.

    The handle only carries the canonical index of its record; every accessor
    is a dictionary lookup in the process-wide tables. A jurisdiction compares
    equal to the ``Alpha2`` and ``Alpha3`` members denoting the same record,
    and its string form is its alpha-2 code.

    The hash is the canonical index, which differs from the hash of the
    equal ``Alpha2`` or ``Alpha3`` member. Key sets and dicts by handles
    only; ``Alpha2.NO in {Jurisdiction.parse("NO")}`` is false.

    >>> no = Jurisdiction.parse("NO")
    >>> no == Alpha3.NOR
    True
    >>> str(no), no.country_code()
    ('NO', 578)
    """

    __slots__ = ("_index",)

    def __init__(self, code: "Alpha2 | Alpha3 | str") -> None:
        object.__setattr__(self, "_index", _lookup_text(code))

    @classmethod
    def _from_index(cls, index: int) -> "Jurisdiction":
        jurisdiction = object.__new__(cls)
        object.__setattr__(jurisdiction, "_index", index)
        return jurisdiction

    @classmethod
    def parse(cls, text: str) -> "Jurisdiction":
        """Look up an alpha-2 or alpha-3 code, ignoring case and surrounding whitespace."""
        return cls._from_index(_lookup_text(text))

    @classmethod
    def from_numeric(cls, code: int) -> "Jurisdiction":
        """Look up an ISO 3166 numeric country code."""
        if not isinstance(code, int) or isinstance(code, bool):
            raise UnknownJurisdiction(code)
        index = get_tables().by_numeric.get(code)
        if index is None:
            raise UnknownJurisdiction(code)
        return cls._from_index(index)

    @classmethod
    def from_alpha2(cls, alpha: Alpha2) -> "Jurisdiction":
        index = get_tables().by_alpha2.get(alpha)
        if index is None:
            raise UnknownJurisdiction(alpha)
        return cls._from_index(index)

    @classmethod
    def from_alpha3(cls, alpha: Alpha3) -> "Jurisdiction":
        index = get_tables().by_alpha3.get(alpha)
        if index is None:
            raise UnknownJurisdiction(alpha)
        return cls._from_index(index)

    @classmethod
    def all(cls) -> list["Jurisdiction"]:
        """Every known jurisdiction in canonical order."""
        return [cls._from_index(index) for index in get_tables().ordered]

    @property
    def index(self) -> int:
        """Canonical index; stable across table regenerations."""
        return self._index

    def name(self) -> str:
        """English short name."""
        return get_tables().countries[self._index].name

    def country_code(self) -> int:
        """ISO 3166-1 numeric country code."""
        return get_tables().countries[self._index].numeric

    def alpha2(self) -> Alpha2:
        return Alpha2(get_tables().countries[self._index].alpha2)

    def alpha3(self) -> Alpha3:
        return Alpha3(get_tables().countries[self._index].alpha3)

    # Region extension; see jurisdiction.region

    def region(self):
        from jurisdiction import region

        return region.region_of(self)

    def sub_region(self):
        from jurisdiction import region

        return region.sub_region_of(self)

    def intermediate_region(self):
        from jurisdiction import region

        return region.intermediate_region_of(self)

    def region_code(self) -> int:
        return int(self.region())

    def sub_region_code(self) -> int:
        return int(self.sub_region())

    def intermediate_region_code(self) -> int:
        return int(self.intermediate_region())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Jurisdiction):
            return self._index == other._index
        if isinstance(other, Alpha2):
            return get_tables().by_alpha2.get(other) == self._index
        if isinstance(other, Alpha3):
            return get_tables().by_alpha3.get(other) == self._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._index)

    def __str__(self) -> str:
        return get_tables().countries[self._index].alpha2

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (str(self),))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_text = core_schema.chain_schema([
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(_validate_text),
        ])
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_text]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema(), when_used="json"
            ),
        )


def _lookup_text(text: object) -> int:
    # Unicode case mapping turns some non-ASCII letters into ASCII ("ß" -> "SS")
    if not isinstance(text, str) or not text.isascii():
        raise UnknownJurisdiction(text)
    code = text.strip().upper()
    tables = get_tables()
    if len(code) == 2:
        index = tables.by_alpha2.get(code)
    elif len(code) == 3:
        index = tables.by_alpha3.get(code)
    else:
        index = None
    if index is None:
        raise UnknownJurisdiction(text)
    return index


def _validate_text(text: str) -> Jurisdiction:
    try:
        return Jurisdiction.parse(text)
    except UnknownJurisdiction as exc:
        # pydantic only reports ValueError as a validation error
        raise ValueError(str(exc)) from exc


def parse(text: str) -> Jurisdiction:
    return Jurisdiction.parse(text)


def from_numeric(code: int) -> Jurisdiction:
    return Jurisdiction.from_numeric(code)
