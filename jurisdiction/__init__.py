"""Lightweight static jurisdiction information.

ISO 3166 alpha-2 / alpha-3 / numeric codes and UN M49 region classification
behind a small immutable ``Jurisdiction`` handle.

    >>> from jurisdiction import Alpha2, Alpha3, Jurisdiction
    >>> no = Jurisdiction.parse("NO")
    >>> no == Alpha2.NO and no == Alpha3.NOR
    True
"""

from jurisdiction.errors import (
    DataIntegrityError,
    JurisdictionError,
    NoRegionClassification,
    UnknownJurisdiction,
)
from jurisdiction.generated.alpha import Alpha2, Alpha3
from jurisdiction.jurisdiction import Jurisdiction, from_numeric, parse

__all__ = [
    "Alpha2",
    "Alpha3",
    "DataIntegrityError",
    "Jurisdiction",
    "JurisdictionError",
    "NoRegionClassification",
    "UnknownJurisdiction",
    "from_numeric",
    "parse",
]
